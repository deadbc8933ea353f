"""Event, registration and participant schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import PaginationRead
from .user import UserSummaryRead


class ArtistSummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image_path: str | None = None


class LocationSummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class EventCreate(BaseModel):
    title: str
    description: str
    start_date: datetime
    genre: str
    type: str
    location_id: int
    artist_id: int | None = None
    image_path: str | None = None
    price: float = Field(default=0.0, ge=0)
    currency: str = Field(default="EUR", min_length=3, max_length=3)


class EventUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    start_date: datetime | None = None
    genre: str | None = None
    type: str | None = None
    location_id: int | None = None
    artist_id: int | None = None
    image_path: str | None = None
    price: float | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)


class EventSummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    start_date: datetime
    genre: str
    type: str
    image_path: str | None = None
    price: float
    currency: str


class EventRead(EventSummaryRead):
    description: str
    location_id: int | None
    artist_id: int | None
    created_at: datetime | None
    artist: ArtistSummaryRead | None = None
    location: LocationSummaryRead | None = None


class EventListResponse(BaseModel):
    events: list[EventRead]
    pagination: PaginationRead


class ParticipationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    event_id: int
    payment_status: str
    payment_intent_id: str | None = None
    amount_paid: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserEventRead(ParticipationRead):
    event: EventRead


class RegistrationResponse(BaseModel):
    message: str
    participation: ParticipationRead


class RegistrationStatusRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_registered: bool
    requires_auth: bool
    payment_status: str | None = None


class ParticipantRead(ParticipationRead):
    user: UserSummaryRead


class ParticipantsEventRead(BaseModel):
    id: int
    title: str
    start_date: datetime
    total_participants: int


class ParticipantsResponse(BaseModel):
    event: ParticipantsEventRead
    participants: list[ParticipantRead]
    pagination: PaginationRead
