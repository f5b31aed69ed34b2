"""Domain models for quality-control tests."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class QualityResult(str, Enum):
    """Outcome of a quality-control test."""

    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


@dataclass(frozen=True)
class QualityTest:
    """A logged quality-control measurement."""

    id: UUID | None
    user_id: str
    product_id: UUID | None
    product_name: str
    test_type: str
    result: QualityResult
    value: str
    unit: str
    standard: str
    date: datetime
    technician: str
    notes: str | None = None
