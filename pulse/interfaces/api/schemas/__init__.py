from .artist import ArtistCreate, ArtistRead, ArtistUpdate
from .auth import RegisterRequest, RegisterResponse, Token
from .common import MessageResponse, PaginationRead
from .contact import ContactMessageCreate, ContactMessageRead, ContactMessageUpdate
from .event import (
    ArtistSummaryRead,
    EventCreate,
    EventListResponse,
    EventRead,
    EventSummaryRead,
    EventUpdate,
    LocationSummaryRead,
    ParticipantRead,
    ParticipantsEventRead,
    ParticipantsResponse,
    ParticipationRead,
    RegistrationResponse,
    RegistrationStatusRead,
    UserEventRead,
)
from .location import (
    LocationCreate,
    LocationDetailRead,
    LocationListResponse,
    LocationRead,
    LocationUpdate,
)
from .notification import (
    NotificationCreate,
    NotificationRead,
    NotificationUpdate,
    ScheduledNotificationCreate,
    ScheduledNotificationListResponse,
    ScheduledNotificationRead,
    SchedulerStatusRead,
)
from .payment import PaymentIntentRequest, PaymentIntentResponse, UploadResponse, WebhookAck
from .stand import StandCreate, StandRead, StandUpdate
from .user import UserRead, UserSummaryRead, UserUpdate

__all__ = [
    "ArtistCreate",
    "ArtistRead",
    "ArtistSummaryRead",
    "ArtistUpdate",
    "ContactMessageCreate",
    "ContactMessageRead",
    "ContactMessageUpdate",
    "EventCreate",
    "EventListResponse",
    "EventRead",
    "EventSummaryRead",
    "EventUpdate",
    "LocationCreate",
    "LocationDetailRead",
    "LocationListResponse",
    "LocationRead",
    "LocationSummaryRead",
    "LocationUpdate",
    "MessageResponse",
    "NotificationCreate",
    "NotificationRead",
    "NotificationUpdate",
    "PaginationRead",
    "ParticipantRead",
    "ParticipantsEventRead",
    "ParticipantsResponse",
    "ParticipationRead",
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    "RegisterRequest",
    "RegisterResponse",
    "RegistrationResponse",
    "RegistrationStatusRead",
    "ScheduledNotificationCreate",
    "ScheduledNotificationListResponse",
    "ScheduledNotificationRead",
    "SchedulerStatusRead",
    "StandCreate",
    "StandRead",
    "StandUpdate",
    "Token",
    "UploadResponse",
    "UserEventRead",
    "UserRead",
    "UserSummaryRead",
    "UserUpdate",
    "WebhookAck",
]
