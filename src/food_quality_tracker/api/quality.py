"""Quality-control test endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from food_quality_tracker.api.auth import require_api_token
from food_quality_tracker.api.models import QualityTestCreate, QualityTestUpdate
from food_quality_tracker.domain.quality import QualityResult

if TYPE_CHECKING:
    from food_quality_tracker.containers import AppContainer

router = APIRouter(tags=["quality"], dependencies=[Depends(require_api_token)])


@router.post("/users/{user_id}/quality-tests", status_code=status.HTTP_201_CREATED)
async def record_test(
    user_id: str, body: QualityTestCreate, request: Request
) -> dict[str, object]:
    """Log a quality-control test."""
    container: AppContainer = request.app.state.container
    test = container.quality_test_service.record_test(
        user_id,
        product_name=body.product_name,
        test_type=body.test_type,
        result=body.result,
        value=body.value,
        unit=body.unit,
        standard=body.standard,
        date=body.date,
        technician=body.technician,
        product_id=body.product_id,
        notes=body.notes,
    )
    return {"test": test}


@router.get("/users/{user_id}/quality-tests")
async def list_tests(
    user_id: str,
    request: Request,
    result: QualityResult | None = Query(default=None),
) -> dict[str, object]:
    """Return a user's quality tests, most recent first."""
    container: AppContainer = request.app.state.container
    return {"tests": container.quality_test_service.list_tests(user_id, result)}


@router.patch("/quality-tests/{test_id}")
async def update_test(
    test_id: UUID, body: QualityTestUpdate, request: Request
) -> dict[str, object]:
    """Update a logged quality test."""
    container: AppContainer = request.app.state.container
    test = container.quality_test_service.update_test(
        test_id, body.model_dump(exclude_unset=True, exclude_none=True)
    )
    if test is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"test": test}


@router.delete("/quality-tests/{test_id}")
async def delete_test(test_id: UUID, request: Request) -> dict[str, str]:
    """Delete a logged quality test."""
    container: AppContainer = request.app.state.container
    if not container.quality_test_service.delete_test(test_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "deleted"}
