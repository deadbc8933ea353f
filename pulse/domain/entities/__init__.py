"""Domain entities exposed by the application."""

from .artist import Artist
from .contact_message import ContactMessage
from .event import DEFAULT_CURRENCY, EVENT_GENRES, EVENT_TYPES, ArtistSummary, Event
from .location import Location
from .notification import (
    NOTIFICATION_TYPE_ERROR,
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    NOTIFICATION_TYPE_WARNING,
    NOTIFICATION_TYPES,
    Notification,
)
from .participation import (
    PAYMENT_STATUS_FAILED,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_PENDING,
    PAYMENT_STATUSES,
    Participation,
)
from .scheduled_notification import (
    SCHEDULED_NOTIFICATION_TYPES,
    TRIGGER_OFFSETS,
    TRIGGER_ONE_HOUR_BEFORE,
    TRIGGER_TEN_MINUTES_BEFORE,
    ScheduledNotification,
)
from .stand import STAND_TYPES, Stand
from .user import ROLE_ADMIN, ROLE_USER, USER_ROLES, User

__all__ = [
    "Artist",
    "ArtistSummary",
    "ContactMessage",
    "DEFAULT_CURRENCY",
    "EVENT_GENRES",
    "EVENT_TYPES",
    "Event",
    "Location",
    "NOTIFICATION_TYPE_ERROR",
    "NOTIFICATION_TYPE_INFO",
    "NOTIFICATION_TYPE_SUCCESS",
    "NOTIFICATION_TYPE_WARNING",
    "NOTIFICATION_TYPES",
    "Notification",
    "PAYMENT_STATUS_FAILED",
    "PAYMENT_STATUS_PAID",
    "PAYMENT_STATUS_PENDING",
    "PAYMENT_STATUSES",
    "Participation",
    "SCHEDULED_NOTIFICATION_TYPES",
    "TRIGGER_OFFSETS",
    "TRIGGER_ONE_HOUR_BEFORE",
    "TRIGGER_TEN_MINUTES_BEFORE",
    "ScheduledNotification",
    "STAND_TYPES",
    "Stand",
    "ROLE_ADMIN",
    "ROLE_USER",
    "USER_ROLES",
    "User",
]
