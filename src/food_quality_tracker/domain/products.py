"""Domain models for scanned and stored products."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class ProductStatus(str, Enum):
    """Freshness of a product relative to its expiry date."""

    FRESH = "fresh"
    WARNING = "warning"
    EXPIRED = "expired"


@dataclass(frozen=True)
class NutritionalInfo:
    """Nutrient amounts per 100g."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    salt: float = 0.0


@dataclass(frozen=True)
class SafetyAssessment:
    """Safety score in [1, 5] with the qualitative flags behind it."""

    safety_score: int
    risk_factors: list[str]


@dataclass(frozen=True)
class NormalizedFields:
    """Catalog fields mapped into the application's vocabulary."""

    name: str
    brand: str
    category: str
    allergens: list[str]
    unrecognized_allergens: list[str]
    ingredients: list[str]
    nutritional_info: NutritionalInfo
    nutrition_grade: str
    eco_score: str
    image_url: str | None = None


@dataclass(frozen=True)
class RawProduct:
    """Product data as returned by a source, before normalization.

    ``curated`` payloads come from the local reference table and are already
    expressed in canonical form.
    """

    barcode: str
    payload: dict[str, object]
    curated: bool = False


@dataclass(frozen=True)
class ProductRecord:
    """Normalized product, optionally persisted in a user's inventory.

    ``status`` is derived from ``expiry_date`` and is never persisted; it is
    None on records read back from storage until they are classified.
    """

    barcode: str
    name: str
    brand: str
    category: str
    allergens: list[str]
    ingredients: list[str]
    nutritional_info: NutritionalInfo
    nutrition_grade: str
    eco_score: str
    safety_score: int
    risk_factors: list[str]
    expiry_date: datetime
    status: ProductStatus | None = None
    quantity: int = 1
    location: str = ""
    image_url: str | None = None
    unrecognized_allergens: list[str] = field(default_factory=list)
    id: UUID | None = None
    user_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
