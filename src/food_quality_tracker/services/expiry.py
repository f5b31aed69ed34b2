"""Shelf-life estimation and freshness classification."""

import math
from datetime import UTC, datetime, timedelta

from food_quality_tracker.domain.products import ProductStatus

SHELF_LIFE_DAYS = {
    "Produits laitiers": 7,
    "Viande": 3,
    "Poisson": 2,
    "Fruits et légumes": 5,
    "Boulangerie": 3,
    "Conserves": 365,
    "Surgelés": 90,
    "Petit-déjeuner": 180,
    "Boissons": 30,
    "Épicerie": 365,
}
DEFAULT_SHELF_LIFE_DAYS = 30
WARNING_WINDOW_DAYS = 7

_SECONDS_PER_DAY = 86400


def shelf_life_days(category: str) -> int:
    """Return the default shelf life for a category."""
    return SHELF_LIFE_DAYS.get(category, DEFAULT_SHELF_LIFE_DAYS)


def estimate_expiry(category: str, now: datetime) -> datetime:
    """Estimate an expiry date from the product category."""
    return now + timedelta(days=shelf_life_days(category))


def as_utc(value: datetime) -> datetime:
    """Treat a datetime without a timezone as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def days_until_expiry(expiry_date: datetime, now: datetime) -> int:
    """Return whole days left before expiry, rounded up."""
    remaining = as_utc(expiry_date) - as_utc(now)
    return math.ceil(remaining.total_seconds() / _SECONDS_PER_DAY)


def classify_status(expiry_date: datetime, now: datetime) -> ProductStatus:
    """Classify freshness from the expiry date and the current time."""
    days = days_until_expiry(expiry_date, now)
    if days < 0:
        return ProductStatus.EXPIRED
    if days <= WARNING_WINDOW_DAYS:
        return ProductStatus.WARNING
    return ProductStatus.FRESH
