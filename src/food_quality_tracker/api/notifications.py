"""Notification and statistics endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from food_quality_tracker.api.auth import require_api_token

if TYPE_CHECKING:
    from food_quality_tracker.containers import AppContainer

router = APIRouter(tags=["notifications"], dependencies=[Depends(require_api_token)])


@router.get("/users/{user_id}/notifications")
async def list_notifications(
    user_id: str, request: Request, unread_only: bool = False
) -> dict[str, object]:
    """Return a user's notifications, newest first."""
    container: AppContainer = request.app.state.container
    return {
        "notifications": container.notification_service.list_notifications(
            user_id, unread_only=unread_only
        )
    }


@router.post("/users/{user_id}/notifications/expiry-sync")
async def sync_expiry_alerts(user_id: str, request: Request) -> dict[str, object]:
    """Create alerts for expiring and expired products."""
    container: AppContainer = request.app.state.container
    return {"created": container.notification_service.sync_expiry_alerts(user_id)}


@router.post("/notifications/{notification_id}/read")
async def mark_as_read(notification_id: UUID, request: Request) -> dict[str, str]:
    """Mark a notification as read."""
    container: AppContainer = request.app.state.container
    if not container.notification_service.mark_as_read(notification_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "ok"}


@router.delete("/notifications/{notification_id}")
async def delete_notification(
    notification_id: UUID, request: Request
) -> dict[str, str]:
    """Delete a notification."""
    container: AppContainer = request.app.state.container
    if not container.notification_service.delete_notification(notification_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "deleted"}


@router.get("/users/{user_id}/stats")
async def user_stats(user_id: str, request: Request) -> dict[str, object]:
    """Return inventory and quality statistics for a user."""
    container: AppContainer = request.app.state.container
    return {"stats": container.stats_service.get_user_stats(user_id)}
