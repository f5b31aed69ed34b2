"""Pydantic models for API request bodies."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from food_quality_tracker.domain.quality import QualityResult


class ProductCreate(BaseModel):
    """Scanned barcode with optional manual overrides."""

    barcode: str = Field(min_length=1)
    name: str | None = None
    brand: str | None = None
    category: str | None = None
    expiry_date: datetime | None = None
    quantity: int = Field(default=1, ge=1)
    location: str = ""


class ProductUpdate(BaseModel):
    """Editable inventory fields."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    brand: str | None = None
    category: str | None = None
    expiry_date: datetime | None = None
    quantity: int | None = Field(default=None, ge=1)
    location: str | None = None


class QualityTestCreate(BaseModel):
    """Quality-control measurement to log."""

    product_name: str
    test_type: str
    result: QualityResult
    value: str
    unit: str
    standard: str
    technician: str
    date: datetime | None = None
    product_id: UUID | None = None
    notes: str | None = None


class QualityTestUpdate(BaseModel):
    """Editable quality test fields."""

    model_config = ConfigDict(extra="forbid")

    product_name: str | None = None
    test_type: str | None = None
    result: QualityResult | None = None
    value: str | None = None
    unit: str | None = None
    standard: str | None = None
    technician: str | None = None
    date: datetime | None = None
    notes: str | None = None
