"""Supabase repository for quality-control tests."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from supabase import Client

from food_quality_tracker.domain.quality import QualityResult, QualityTest
from food_quality_tracker.services.quality import QualityTestRepository

_COLUMNS = (
    "id, user_id, product_id, product_name, test_type, result, value, unit, "
    "standard, date, technician, notes"
)


@dataclass
class SupabaseQualityTestRepository(QualityTestRepository):
    """Supabase implementation for quality tests."""

    client: Client

    def create_test(self, test: QualityTest) -> UUID:
        """Insert a quality test row and return its id."""
        response = (
            self.client.table("quality_tests")
            .insert(
                {
                    "user_id": test.user_id,
                    "product_id": str(test.product_id) if test.product_id else None,
                    "product_name": test.product_name,
                    "test_type": test.test_type,
                    "result": test.result.value,
                    "value": test.value,
                    "unit": test.unit,
                    "standard": test.standard,
                    "date": test.date.isoformat(),
                    "technician": test.technician,
                    "notes": test.notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create quality test")
        return UUID(response.data[0]["id"])

    def get_test(self, test_id: UUID) -> QualityTest | None:
        """Return a quality test row by id."""
        response = (
            self.client.table("quality_tests")
            .select(_COLUMNS)
            .eq("id", str(test_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_test(response.data[0])

    def list_user_tests(self, user_id: str) -> list[QualityTest]:
        """Return quality tests for a user, most recent first."""
        response = (
            self.client.table("quality_tests")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("date", desc=True)
            .execute()
        )
        return [_parse_test(row) for row in response.data or []]

    def update_test(self, test_id: UUID, updates: dict[str, object]) -> None:
        """Update a quality test row."""
        self.client.table("quality_tests").update(
            {key: _serialize(value) for key, value in updates.items()}
        ).eq("id", str(test_id)).execute()

    def delete_test(self, test_id: UUID) -> None:
        """Delete a quality test row."""
        self.client.table("quality_tests").delete().eq("id", str(test_id)).execute()


def _serialize(value: object) -> object:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


def _parse_test(row: dict[str, object]) -> QualityTest:
    return QualityTest(
        id=UUID(row["id"]),
        user_id=str(row.get("user_id", "")),
        product_id=UUID(row["product_id"]) if row.get("product_id") else None,
        product_name=str(row.get("product_name", "")),
        test_type=str(row.get("test_type", "")),
        result=QualityResult(row.get("result", QualityResult.PASS.value)),
        value=str(row.get("value", "")),
        unit=str(row.get("unit", "")),
        standard=str(row.get("standard", "")),
        date=datetime.fromisoformat(row["date"]),
        technician=str(row.get("technician", "")),
        notes=row.get("notes"),
    )
