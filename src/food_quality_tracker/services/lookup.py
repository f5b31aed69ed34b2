"""Barcode resolution and product enrichment."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx

from food_quality_tracker.adapters.openfoodfacts_client import CatalogClient
from food_quality_tracker.domain.products import (
    NutritionalInfo,
    ProductRecord,
    RawProduct,
)
from food_quality_tracker.services import normalizer, scoring
from food_quality_tracker.services.expiry import (
    as_utc,
    classify_status,
    estimate_expiry,
)
from food_quality_tracker.services.reference_catalog import REFERENCE_PRODUCTS

MANUAL_ENTRY_SAFETY_SCORE = 3

_logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


@dataclass
class BarcodeResolver:
    """Resolve barcodes against the reference table, then the catalog.

    A single catalog attempt is made; any failure is reported as not found.
    """

    catalog_client: CatalogClient
    reference_products: dict[str, dict[str, object]] = field(
        default_factory=lambda: REFERENCE_PRODUCTS
    )

    async def resolve(self, barcode: str) -> RawProduct | None:
        """Return raw product data for a barcode, or None when not found."""
        if not barcode:
            raise ValueError("barcode must not be empty")
        curated = self.reference_products.get(barcode)
        if curated is not None:
            return RawProduct(barcode=barcode, payload=curated, curated=True)

        try:
            data = await self.catalog_client.get_product(barcode)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Catalog lookup failed: barcode=%s error=%s", barcode, exc)
            return None

        if not isinstance(data, dict):
            data = {}
        product = data.get("product")
        if data.get("status") != 1 or not isinstance(product, dict):
            _logger.info("Catalog lookup not found: barcode=%s", barcode)
            return None
        return RawProduct(barcode=barcode, payload=product)


@dataclass
class ProductLookupService:
    """Build normalized product records from scans and searches."""

    resolver: BarcodeResolver
    search_page_size: int = 20
    clock: Callable[[], datetime] = utc_now

    async def lookup(self, barcode: str) -> ProductRecord | None:
        """Resolve a barcode and enrich the result into a product record."""
        raw = await self.resolver.resolve(barcode)
        if raw is None:
            return None
        return enrich(raw, self.clock())

    async def search(self, query: str, page: int = 1) -> list[ProductRecord]:
        """Search the catalog and normalize every hit with a barcode."""
        try:
            data = await self.resolver.catalog_client.search_products(
                query, page=page, page_size=self.search_page_size
            )
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Catalog search failed: query=%s error=%s", query, exc)
            return []

        products = data.get("products") if isinstance(data, dict) else None
        if not isinstance(products, list):
            return []
        now = self.clock()
        records = []
        for product in products:
            if not isinstance(product, dict):
                continue
            code = product.get("code")
            if not isinstance(code, str) or not code:
                continue
            records.append(enrich(RawProduct(barcode=code, payload=product), now))
        return records

    def manual_entry(  # noqa: PLR0913
        self,
        barcode: str,
        *,
        name: str | None = None,
        brand: str = "",
        category: str | None = None,
        expiry_date: datetime | None = None,
        quantity: int = 1,
        location: str = "",
    ) -> ProductRecord:
        """Return the record offered for manual completion of an unknown scan."""
        if quantity < 1:
            raise ValueError("quantity must be a positive integer")
        now = self.clock()
        resolved_category = canonical_category(category)
        if expiry_date is not None:
            expiry = as_utc(expiry_date)
        else:
            expiry = estimate_expiry(resolved_category, now)
        return ProductRecord(
            barcode=barcode,
            name=name or normalizer.UNKNOWN_PRODUCT_NAME,
            brand=brand,
            category=resolved_category,
            allergens=[],
            ingredients=[],
            nutritional_info=NutritionalInfo(),
            nutrition_grade=normalizer.DEFAULT_GRADE,
            eco_score=normalizer.DEFAULT_GRADE,
            safety_score=MANUAL_ENTRY_SAFETY_SCORE,
            risk_factors=[],
            expiry_date=expiry,
            status=classify_status(expiry, now),
            quantity=quantity,
            location=location,
        )


def canonical_category(category: str | None) -> str:
    """Keep canonical categories as-is and map anything else."""
    if category in normalizer.CANONICAL_CATEGORIES:
        return category
    return normalizer.map_category(category)


def enrich(raw: RawProduct, now: datetime) -> ProductRecord:
    """Turn raw source data into a product record at the given time."""
    if raw.curated:
        return _from_curated(raw, now)

    fields = normalizer.normalize(raw.payload)
    assessment = scoring.score(raw.payload, fields.allergens)
    expiry = estimate_expiry(fields.category, now)
    return ProductRecord(
        barcode=raw.barcode,
        name=fields.name,
        brand=fields.brand,
        category=fields.category,
        allergens=fields.allergens,
        ingredients=fields.ingredients,
        nutritional_info=fields.nutritional_info,
        nutrition_grade=fields.nutrition_grade,
        eco_score=fields.eco_score,
        safety_score=assessment.safety_score,
        risk_factors=assessment.risk_factors,
        expiry_date=expiry,
        status=classify_status(expiry, now),
        image_url=fields.image_url,
        unrecognized_allergens=fields.unrecognized_allergens,
    )


def _from_curated(raw: RawProduct, now: datetime) -> ProductRecord:
    payload = raw.payload
    category = canonical_category(str(payload.get("category") or ""))
    expiry = estimate_expiry(category, now)
    nutrients = payload.get("nutritional_info")
    return ProductRecord(
        barcode=raw.barcode,
        name=str(payload.get("name") or normalizer.UNKNOWN_PRODUCT_NAME),
        brand=str(payload.get("brand") or ""),
        category=category,
        allergens=list(payload.get("allergens") or []),
        ingredients=list(payload.get("ingredients") or []),
        nutritional_info=nutritional_info_from_dict(nutrients),
        nutrition_grade=normalizer.normalize_grade(payload.get("nutrition_grade")),
        eco_score=normalizer.normalize_grade(payload.get("eco_score")),
        safety_score=scoring.clamp_score(int(payload.get("safety_score") or 1)),
        risk_factors=list(payload.get("risk_factors") or []),
        expiry_date=expiry,
        status=classify_status(expiry, now),
        image_url=payload.get("image_url") or None,
    )


def nutritional_info_from_dict(values: object) -> NutritionalInfo:
    """Build nutrient info from a canonical mapping, defaulting to zero."""
    if not isinstance(values, dict):
        return NutritionalInfo()
    return NutritionalInfo(
        calories=float(values.get("calories") or 0.0),
        protein=float(values.get("protein") or 0.0),
        carbs=float(values.get("carbs") or 0.0),
        fat=float(values.get("fat") or 0.0),
        fiber=float(values.get("fiber") or 0.0),
        sugar=float(values.get("sugar") or 0.0),
        salt=float(values.get("salt") or 0.0),
    )
