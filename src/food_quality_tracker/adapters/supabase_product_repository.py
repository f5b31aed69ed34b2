"""Supabase repository for inventory products."""

from dataclasses import asdict, dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from food_quality_tracker.domain.products import ProductRecord
from food_quality_tracker.services.inventory import ProductRepository
from food_quality_tracker.services.lookup import nutritional_info_from_dict

_COLUMNS = (
    "id, user_id, barcode, name, brand, category, allergens, "
    "unrecognized_allergens, ingredients, nutritional_info, nutrition_grade, "
    "eco_score, safety_score, risk_factors, expiry_date, quantity, location, "
    "image_url, created_at, updated_at"
)


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase implementation for inventory products."""

    client: Client

    def create_product(
        self, user_id: str, product: ProductRecord, created_at: datetime
    ) -> UUID:
        """Insert a product row and return its id."""
        response = (
            self.client.table("products")
            .insert(
                {
                    "user_id": user_id,
                    "barcode": product.barcode,
                    "name": product.name,
                    "brand": product.brand,
                    "category": product.category,
                    "allergens": product.allergens,
                    "unrecognized_allergens": product.unrecognized_allergens,
                    "ingredients": product.ingredients,
                    "nutritional_info": asdict(product.nutritional_info),
                    "nutrition_grade": product.nutrition_grade,
                    "eco_score": product.eco_score,
                    "safety_score": product.safety_score,
                    "risk_factors": product.risk_factors,
                    "expiry_date": product.expiry_date.isoformat(),
                    "quantity": product.quantity,
                    "location": product.location,
                    "image_url": product.image_url,
                    "created_at": created_at.isoformat(),
                    "updated_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create product")
        return UUID(response.data[0]["id"])

    def get_product(self, product_id: UUID) -> ProductRecord | None:
        """Return a product row by id."""
        response = (
            self.client.table("products")
            .select(_COLUMNS)
            .eq("id", str(product_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def list_user_products(self, user_id: str) -> list[ProductRecord]:
        """Return products for a user, newest first."""
        response = (
            self.client.table("products")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]

    def update_product(
        self, product_id: UUID, updates: dict[str, object], updated_at: datetime
    ) -> None:
        """Update a product row."""
        payload = {
            key: value.isoformat() if isinstance(value, datetime) else value
            for key, value in updates.items()
        }
        payload["updated_at"] = updated_at.isoformat()
        self.client.table("products").update(payload).eq(
            "id", str(product_id)
        ).execute()

    def delete_product(self, product_id: UUID) -> None:
        """Delete a product row."""
        self.client.table("products").delete().eq("id", str(product_id)).execute()


def _parse_product(row: dict[str, object]) -> ProductRecord:
    return ProductRecord(
        id=UUID(row["id"]),
        user_id=row.get("user_id"),
        barcode=str(row.get("barcode", "")),
        name=str(row.get("name", "")),
        brand=str(row.get("brand") or ""),
        category=str(row.get("category", "")),
        allergens=list(row.get("allergens") or []),
        unrecognized_allergens=list(row.get("unrecognized_allergens") or []),
        ingredients=list(row.get("ingredients") or []),
        nutritional_info=nutritional_info_from_dict(row.get("nutritional_info")),
        nutrition_grade=str(row.get("nutrition_grade") or "C"),
        eco_score=str(row.get("eco_score") or "C"),
        safety_score=int(row.get("safety_score", 3)),
        risk_factors=list(row.get("risk_factors") or []),
        expiry_date=datetime.fromisoformat(row["expiry_date"]),
        quantity=int(row.get("quantity", 1)),
        location=str(row.get("location") or ""),
        image_url=row.get("image_url"),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
