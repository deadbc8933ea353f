"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TYPE_INFO = "INFO"
NOTIFICATION_TYPE_SUCCESS = "SUCCESS"
NOTIFICATION_TYPE_WARNING = "WARNING"
NOTIFICATION_TYPE_ERROR = "ERROR"
NOTIFICATION_TYPES = (
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    NOTIFICATION_TYPE_WARNING,
    NOTIFICATION_TYPE_ERROR,
)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: int
    title: str
    message: str
    type: str = NOTIFICATION_TYPE_INFO
    created_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None


__all__ = [
    "NOTIFICATION_TYPE_ERROR",
    "NOTIFICATION_TYPE_INFO",
    "NOTIFICATION_TYPE_SUCCESS",
    "NOTIFICATION_TYPE_WARNING",
    "NOTIFICATION_TYPES",
    "Notification",
]
