"""Quality-control test log."""

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from food_quality_tracker.domain.quality import QualityResult, QualityTest
from food_quality_tracker.services.lookup import utc_now
from food_quality_tracker.services.notifications import NotificationService

UPDATABLE_FIELDS = frozenset(
    {
        "product_name",
        "test_type",
        "result",
        "value",
        "unit",
        "standard",
        "date",
        "technician",
        "notes",
    }
)


class QualityTestRepository(Protocol):
    """Persistence interface for quality tests."""

    def create_test(self, test: QualityTest) -> UUID:
        """Persist a quality test and return its id."""

    def get_test(self, test_id: UUID) -> QualityTest | None:
        """Return a quality test by id."""

    def list_user_tests(self, user_id: str) -> list[QualityTest]:
        """Return tests of a user, most recent date first."""

    def update_test(self, test_id: UUID, updates: dict[str, object]) -> None:
        """Apply field updates to a quality test."""

    def delete_test(self, test_id: UUID) -> None:
        """Delete a quality test."""


@dataclass
class QualityTestService:
    """Records quality tests and alerts on non-compliant results."""

    repository: QualityTestRepository
    notification_service: NotificationService
    clock: Callable[[], datetime] = utc_now

    def record_test(  # noqa: PLR0913
        self,
        user_id: str,
        *,
        product_name: str,
        test_type: str,
        result: QualityResult,
        value: str,
        unit: str,
        standard: str,
        technician: str,
        date: datetime | None = None,
        product_id: UUID | None = None,
        notes: str | None = None,
    ) -> QualityTest:
        """Persist a test result and notify when it is not a pass."""
        test = QualityTest(
            id=None,
            user_id=user_id,
            product_id=product_id,
            product_name=product_name,
            test_type=test_type,
            result=result,
            value=value,
            unit=unit,
            standard=standard,
            date=date or self.clock(),
            technician=technician,
            notes=notes,
        )
        test = dataclasses.replace(test, id=self.repository.create_test(test))
        self.notification_service.notify_quality_result(test)
        return test

    def list_tests(
        self, user_id: str, result: QualityResult | None = None
    ) -> list[QualityTest]:
        """Return a user's tests, optionally filtered by result."""
        tests = self.repository.list_user_tests(user_id)
        if result is None:
            return tests
        return [test for test in tests if test.result == result]

    def update_test(
        self, test_id: UUID, updates: dict[str, object]
    ) -> QualityTest | None:
        """Update a quality test."""
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown fields: {', '.join(sorted(unknown))}")
        if self.repository.get_test(test_id) is None:
            return None
        if updates:
            self.repository.update_test(test_id, dict(updates))
        return self.repository.get_test(test_id)

    def delete_test(self, test_id: UUID) -> bool:
        """Delete a quality test, returning False when missing."""
        if self.repository.get_test(test_id) is None:
            return False
        self.repository.delete_test(test_id)
        return True
