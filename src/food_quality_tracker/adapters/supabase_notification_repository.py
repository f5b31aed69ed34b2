"""Supabase repository for notifications."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from food_quality_tracker.domain.notifications import (
    Notification,
    NotificationPriority,
    NotificationType,
)
from food_quality_tracker.services.notifications import NotificationRepository

_COLUMNS = "id, user_id, type, title, message, timestamp, read, priority, product_id"


@dataclass
class SupabaseNotificationRepository(NotificationRepository):
    """Supabase implementation for notifications."""

    client: Client

    def create_notification(self, notification: Notification) -> UUID:
        """Insert a notification row and return its id."""
        response = (
            self.client.table("notifications")
            .insert(
                {
                    "user_id": notification.user_id,
                    "type": notification.type.value,
                    "title": notification.title,
                    "message": notification.message,
                    "timestamp": notification.timestamp.isoformat(),
                    "read": notification.read,
                    "priority": notification.priority.value,
                    "product_id": str(notification.product_id)
                    if notification.product_id
                    else None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create notification")
        return UUID(response.data[0]["id"])

    def get_notification(self, notification_id: UUID) -> Notification | None:
        """Return a notification row by id."""
        response = (
            self.client.table("notifications")
            .select(_COLUMNS)
            .eq("id", str(notification_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_notification(response.data[0])

    def list_user_notifications(self, user_id: str) -> list[Notification]:
        """Return notifications for a user, newest first."""
        response = (
            self.client.table("notifications")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("timestamp", desc=True)
            .execute()
        )
        return [_parse_notification(row) for row in response.data or []]

    def mark_as_read(self, notification_id: UUID) -> None:
        """Flag a notification row as read."""
        self.client.table("notifications").update({"read": True}).eq(
            "id", str(notification_id)
        ).execute()

    def delete_notification(self, notification_id: UUID) -> None:
        """Delete a notification row."""
        self.client.table("notifications").delete().eq(
            "id", str(notification_id)
        ).execute()


def _parse_notification(row: dict[str, object]) -> Notification:
    return Notification(
        id=UUID(row["id"]),
        user_id=str(row.get("user_id", "")),
        type=NotificationType(row.get("type", NotificationType.SYSTEM.value)),
        title=str(row.get("title", "")),
        message=str(row.get("message", "")),
        timestamp=datetime.fromisoformat(row["timestamp"]),
        read=bool(row.get("read", False)),
        priority=NotificationPriority(
            row.get("priority", NotificationPriority.LOW.value)
        ),
        product_id=UUID(row["product_id"]) if row.get("product_id") else None,
    )
