"""Domain models for statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserStats:
    """Inventory and quality-control totals for a user."""

    total_products: int
    total_tests: int
    total_notifications: int
    expired_products: int
    warning_products: int
    fresh_products: int
    compliance: float
    passed_tests: int
    failed_tests: int
    warning_tests: int
