"""Inventory of scanned products per user."""

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from food_quality_tracker.domain.products import ProductRecord, ProductStatus
from food_quality_tracker.services.expiry import (
    as_utc,
    classify_status,
    estimate_expiry,
)
from food_quality_tracker.services.lookup import (
    ProductLookupService,
    canonical_category,
    utc_now,
)

UPDATABLE_FIELDS = frozenset(
    {"name", "brand", "category", "expiry_date", "quantity", "location"}
)

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Persistence interface for inventory products."""

    def create_product(
        self, user_id: str, product: ProductRecord, created_at: datetime
    ) -> UUID:
        """Persist a product and return its id."""

    def get_product(self, product_id: UUID) -> ProductRecord | None:
        """Return a product by id."""

    def list_user_products(self, user_id: str) -> list[ProductRecord]:
        """Return all products of a user, newest first."""

    def update_product(
        self, product_id: UUID, updates: dict[str, object], updated_at: datetime
    ) -> None:
        """Apply field updates to a product."""

    def delete_product(self, product_id: UUID) -> None:
        """Delete a product."""


@dataclass
class InventoryService:
    """Stores products and reports their freshness at read time."""

    repository: ProductRepository
    lookup_service: ProductLookupService
    clock: Callable[[], datetime] = utc_now

    def add_product(self, user_id: str, product: ProductRecord) -> ProductRecord:
        """Persist a product record for a user."""
        if product.quantity < 1:
            raise ValueError("quantity must be a positive integer")
        now = self.clock()
        product_id = self.repository.create_product(user_id, product, created_at=now)
        stored = dataclasses.replace(
            product, id=product_id, user_id=user_id, created_at=now, updated_at=now
        )
        return self._classify(stored, now)

    async def add_from_barcode(  # noqa: PLR0913
        self,
        user_id: str,
        barcode: str,
        *,
        name: str | None = None,
        brand: str | None = None,
        category: str | None = None,
        expiry_date: datetime | None = None,
        quantity: int = 1,
        location: str = "",
    ) -> ProductRecord:
        """Look up a scanned barcode and add it, falling back to manual entry."""
        product = await self.lookup_service.lookup(barcode)
        if product is None:
            _logger.info("Adding product by manual entry: barcode=%s", barcode)
            product = self.lookup_service.manual_entry(
                barcode,
                name=name,
                brand=brand or "",
                category=category,
                expiry_date=expiry_date,
                quantity=quantity,
                location=location,
            )
            return self.add_product(user_id, product)

        overrides: dict[str, object] = {"quantity": quantity, "location": location}
        if name:
            overrides["name"] = name
        if brand is not None:
            overrides["brand"] = brand
        if category:
            overrides["category"] = canonical_category(category)
            overrides["expiry_date"] = estimate_expiry(
                overrides["category"], self.clock()
            )
        if expiry_date is not None:
            overrides["expiry_date"] = as_utc(expiry_date)
        return self.add_product(user_id, dataclasses.replace(product, **overrides))

    def get_product(self, product_id: UUID) -> ProductRecord | None:
        """Return a product with its current status."""
        product = self.repository.get_product(product_id)
        if product is None:
            return None
        return self._classify(product, self.clock())

    def list_products(
        self, user_id: str, status: ProductStatus | None = None
    ) -> list[ProductRecord]:
        """Return a user's products, newest first, classified at read time."""
        now = self.clock()
        products = [
            self._classify(product, now)
            for product in self.repository.list_user_products(user_id)
        ]
        if status is None:
            return products
        return [product for product in products if product.status == status]

    def update_product(
        self, product_id: UUID, updates: dict[str, object]
    ) -> ProductRecord | None:
        """Update editable fields of a product."""
        if "barcode" in updates:
            raise ValueError("barcode cannot be changed")
        unknown = set(updates) - UPDATABLE_FIELDS - {"status"}
        if unknown:
            raise ValueError(f"Unknown fields: {', '.join(sorted(unknown))}")
        cleaned = {
            key: value for key, value in updates.items() if key in UPDATABLE_FIELDS
        }
        if "quantity" in cleaned:
            quantity = cleaned["quantity"]
            if not isinstance(quantity, int) or quantity < 1:
                raise ValueError("quantity must be a positive integer")
        if "category" in cleaned:
            cleaned["category"] = canonical_category(str(cleaned["category"] or ""))
        if isinstance(cleaned.get("expiry_date"), datetime):
            cleaned["expiry_date"] = as_utc(cleaned["expiry_date"])
        if self.repository.get_product(product_id) is None:
            return None
        if cleaned:
            self.repository.update_product(product_id, cleaned, updated_at=self.clock())
        return self.get_product(product_id)

    def delete_product(self, product_id: UUID) -> bool:
        """Delete a product, returning False when it does not exist."""
        if self.repository.get_product(product_id) is None:
            return False
        self.repository.delete_product(product_id)
        return True

    @staticmethod
    def _classify(product: ProductRecord, now: datetime) -> ProductRecord:
        return dataclasses.replace(
            product, status=classify_status(product.expiry_date, now)
        )
