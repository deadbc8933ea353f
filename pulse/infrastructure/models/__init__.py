"""ORM models used by the application infrastructure."""

from .artist import ArtistModel
from .contact_message import ContactMessageModel
from .event import EventModel
from .location import LocationModel
from .notification import NotificationModel
from .participation import ParticipationModel
from .processed_webhook_event import ProcessedWebhookEventModel
from .scheduled_notification import ScheduledNotificationModel
from .stand import StandModel
from .user import UserModel

__all__ = [
    "ArtistModel",
    "ContactMessageModel",
    "EventModel",
    "LocationModel",
    "NotificationModel",
    "ParticipationModel",
    "ProcessedWebhookEventModel",
    "ScheduledNotificationModel",
    "StandModel",
    "UserModel",
]
