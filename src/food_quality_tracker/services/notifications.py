"""Notification storage and alert generation."""

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from food_quality_tracker.domain.notifications import (
    Notification,
    NotificationPriority,
    NotificationType,
)
from food_quality_tracker.domain.products import ProductStatus
from food_quality_tracker.domain.quality import QualityResult, QualityTest
from food_quality_tracker.services.expiry import days_until_expiry
from food_quality_tracker.services.inventory import InventoryService
from food_quality_tracker.services.lookup import utc_now

EXPIRING_TITLE = "Produit expirant bientôt"
EXPIRED_TITLE = "Produit expiré"
QUALITY_FAIL_TITLE = "Test de qualité non conforme"
QUALITY_WARNING_TITLE = "Test de qualité à surveiller"
URGENT_EXPIRY_DAYS = 3

_logger = logging.getLogger(__name__)


class NotificationRepository(Protocol):
    """Persistence interface for notifications."""

    def create_notification(self, notification: Notification) -> UUID:
        """Persist a notification and return its id."""

    def get_notification(self, notification_id: UUID) -> Notification | None:
        """Return a notification by id."""

    def list_user_notifications(self, user_id: str) -> list[Notification]:
        """Return notifications of a user, newest first."""

    def mark_as_read(self, notification_id: UUID) -> None:
        """Flag a notification as read."""

    def delete_notification(self, notification_id: UUID) -> None:
        """Delete a notification."""


@dataclass
class NotificationService:
    """Application service for user notifications."""

    repository: NotificationRepository
    inventory_service: InventoryService
    clock: Callable[[], datetime] = utc_now

    def add_notification(  # noqa: PLR0913
        self,
        user_id: str,
        notification_type: NotificationType,
        title: str,
        message: str,
        priority: NotificationPriority,
        product_id: UUID | None = None,
    ) -> Notification:
        """Create and persist a notification."""
        notification = Notification(
            id=None,
            user_id=user_id,
            type=notification_type,
            title=title,
            message=message,
            timestamp=self.clock(),
            priority=priority,
            product_id=product_id,
        )
        notification_id = self.repository.create_notification(notification)
        return dataclasses.replace(notification, id=notification_id)

    def list_notifications(
        self, user_id: str, unread_only: bool = False
    ) -> list[Notification]:
        """Return a user's notifications, newest first."""
        notifications = self.repository.list_user_notifications(user_id)
        if unread_only:
            return [item for item in notifications if not item.read]
        return notifications

    def mark_as_read(self, notification_id: UUID) -> bool:
        """Mark a notification as read, returning False when missing."""
        if self.repository.get_notification(notification_id) is None:
            return False
        self.repository.mark_as_read(notification_id)
        return True

    def delete_notification(self, notification_id: UUID) -> bool:
        """Delete a notification, returning False when missing."""
        if self.repository.get_notification(notification_id) is None:
            return False
        self.repository.delete_notification(notification_id)
        return True

    def sync_expiry_alerts(self, user_id: str) -> list[Notification]:
        """Create expiry alerts for products that are expiring or expired."""
        existing = {
            (item.product_id, item.title)
            for item in self.repository.list_user_notifications(user_id)
            if item.type == NotificationType.EXPIRY
        }
        now = self.clock()
        created: list[Notification] = []
        for product in self.inventory_service.list_products(user_id):
            if product.status == ProductStatus.FRESH:
                continue
            days = days_until_expiry(product.expiry_date, now)
            if product.status == ProductStatus.EXPIRED:
                title = EXPIRED_TITLE
                message = f"{product.name} est expiré depuis {abs(days)} jour(s)"
                priority = NotificationPriority.HIGH
            else:
                title = EXPIRING_TITLE
                message = f"{product.name} expire dans {days} jour(s)"
                priority = (
                    NotificationPriority.HIGH
                    if days <= URGENT_EXPIRY_DAYS
                    else NotificationPriority.MEDIUM
                )
            if (product.id, title) in existing:
                continue
            created.append(
                self.add_notification(
                    user_id,
                    NotificationType.EXPIRY,
                    title,
                    message,
                    priority,
                    product_id=product.id,
                )
            )
        if created:
            _logger.info(
                "Expiry alerts created: user_id=%s count=%s", user_id, len(created)
            )
        return created

    def notify_quality_result(self, test: QualityTest) -> Notification | None:
        """Raise an alert for a failed or borderline quality test."""
        if test.result == QualityResult.PASS:
            return None
        if test.result == QualityResult.FAIL:
            title = QUALITY_FAIL_TITLE
            message = (
                f"{test.product_name} a échoué au test {test.test_type} "
                f"({test.value} {test.unit}, norme {test.standard})"
            )
            priority = NotificationPriority.HIGH
        else:
            title = QUALITY_WARNING_TITLE
            message = (
                f"{test.product_name} est hors tolérance au test {test.test_type} "
                f"({test.value} {test.unit}, norme {test.standard})"
            )
            priority = NotificationPriority.MEDIUM
        return self.add_notification(
            test.user_id,
            NotificationType.QUALITY,
            title,
            message,
            priority,
            product_id=test.product_id,
        )
