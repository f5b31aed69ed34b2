"""Product lookup and inventory endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from food_quality_tracker.api.auth import require_api_token
from food_quality_tracker.api.models import ProductCreate, ProductUpdate
from food_quality_tracker.domain.products import ProductStatus

if TYPE_CHECKING:
    from food_quality_tracker.containers import AppContainer

router = APIRouter(tags=["products"], dependencies=[Depends(require_api_token)])


@router.get("/products/lookup/{barcode}")
async def lookup_product(barcode: str, request: Request) -> dict[str, object]:
    """Resolve a scanned barcode, offering a manual-entry template if unknown."""
    container: AppContainer = request.app.state.container
    product = await container.lookup_service.lookup(barcode)
    if product is None:
        return {
            "found": False,
            "product": container.lookup_service.manual_entry(barcode),
        }
    return {"found": True, "product": product}


@router.get("/products/search")
async def search_products(
    request: Request, q: str = Query(min_length=1), page: int = Query(1, ge=1)
) -> dict[str, object]:
    """Search the product catalog."""
    container: AppContainer = request.app.state.container
    return {"products": await container.lookup_service.search(q, page=page)}


@router.post("/users/{user_id}/products", status_code=status.HTTP_201_CREATED)
async def add_product(
    user_id: str, body: ProductCreate, request: Request
) -> dict[str, object]:
    """Add a scanned product to a user's inventory."""
    container: AppContainer = request.app.state.container
    product = await container.inventory_service.add_from_barcode(
        user_id,
        body.barcode,
        name=body.name,
        brand=body.brand,
        category=body.category,
        expiry_date=body.expiry_date,
        quantity=body.quantity,
        location=body.location,
    )
    return {"product": product}


@router.get("/users/{user_id}/products")
async def list_products(
    user_id: str,
    request: Request,
    status_filter: ProductStatus | None = Query(default=None, alias="status"),
) -> dict[str, object]:
    """Return a user's inventory with freshness computed now."""
    container: AppContainer = request.app.state.container
    return {
        "products": container.inventory_service.list_products(
            user_id, status=status_filter
        )
    }


@router.get("/products/{product_id}")
async def get_product(product_id: UUID, request: Request) -> dict[str, object]:
    """Return one inventory product."""
    container: AppContainer = request.app.state.container
    product = container.inventory_service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"product": product}


@router.patch("/products/{product_id}")
async def update_product(
    product_id: UUID, body: ProductUpdate, request: Request
) -> dict[str, object]:
    """Update editable fields of an inventory product."""
    container: AppContainer = request.app.state.container
    try:
        product = container.inventory_service.update_product(
            product_id, body.model_dump(exclude_unset=True, exclude_none=True)
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"product": product}


@router.delete("/products/{product_id}")
async def delete_product(product_id: UUID, request: Request) -> dict[str, str]:
    """Remove a product from the inventory."""
    container: AppContainer = request.app.state.container
    if not container.inventory_service.delete_product(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "deleted"}
