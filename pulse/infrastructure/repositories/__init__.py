"""Repository implementations for infrastructure layer."""

from .artist_repository import ArtistRepository
from .contact_message_repository import ContactMessageRepository
from .event_repository import EventRepository
from .location_repository import LocationRepository
from .notification_repository import NotificationRepository
from .participation_repository import ParticipationRepository
from .processed_webhook_event_repository import ProcessedWebhookEventRepository
from .scheduled_notification_repository import ScheduledNotificationRepository
from .stand_repository import StandRepository
from .user_repository import UserRepository

__all__ = [
    "ArtistRepository",
    "ContactMessageRepository",
    "EventRepository",
    "LocationRepository",
    "NotificationRepository",
    "ParticipationRepository",
    "ProcessedWebhookEventRepository",
    "ScheduledNotificationRepository",
    "StandRepository",
    "UserRepository",
]
