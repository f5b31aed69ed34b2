"""Domain models for user notifications."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class NotificationType(str, Enum):
    """Source of a notification."""

    EXPIRY = "expiry"
    QUALITY = "quality"
    SYSTEM = "system"


class NotificationPriority(str, Enum):
    """How urgently a notification should be surfaced."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Notification:
    """A notification addressed to one user."""

    id: UUID | None
    user_id: str
    type: NotificationType
    title: str
    message: str
    timestamp: datetime
    priority: NotificationPriority
    read: bool = False
    product_id: UUID | None = None
