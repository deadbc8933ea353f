"""Conversions from ORM models to domain entities shared by repositories."""

from __future__ import annotations

from pulse.domain.entities import (
    ArtistSummary,
    Event,
    Location,
    Stand,
    User,
)
from pulse.infrastructure.models import (
    ArtistModel,
    EventModel,
    LocationModel,
    StandModel,
    UserModel,
)
from pulse.utils import ensure_app_timezone


def user_to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        username=model.username,
        email=model.email,
        password=model.password,
        role=model.role,
        created_at=ensure_app_timezone(model.created_at),
        updated_at=ensure_app_timezone(model.updated_at),
    )


def location_to_entity(model: LocationModel | None) -> Location | None:
    """Return the location without its related events and stands."""

    if model is None:
        return None
    return Location(
        id=model.id,
        name=model.name,
        address=model.address,
        latitude=model.latitude,
        longitude=model.longitude,
        created_at=ensure_app_timezone(model.created_at),
    )


def artist_summary_to_entity(model: ArtistModel | None) -> ArtistSummary | None:
    if model is None:
        return None
    return ArtistSummary(id=model.id, name=model.name, image_path=model.image_path)


def event_to_entity(model: EventModel) -> Event:
    return Event(
        id=model.id,
        title=model.title,
        description=model.description,
        start_date=ensure_app_timezone(model.start_date),
        genre=model.genre,
        type=model.type,
        location_id=model.location_id,
        artist_id=model.artist_id,
        image_path=model.image_path,
        price=float(model.price or 0),
        currency=model.currency,
        created_at=ensure_app_timezone(model.created_at),
        artist=artist_summary_to_entity(model.artist),
        location=location_to_entity(model.location),
    )


def stand_to_entity(model: StandModel) -> Stand:
    return Stand(
        id=model.id,
        name=model.name,
        description=model.description,
        type=model.type,
        location_id=model.location_id,
        opened_at=ensure_app_timezone(model.opened_at),
        closed_at=ensure_app_timezone(model.closed_at),
        event_id=model.event_id,
        created_at=ensure_app_timezone(model.created_at),
        location=location_to_entity(model.location),
        event_title=model.event.title if model.event is not None else None,
    )


__all__ = [
    "artist_summary_to_entity",
    "event_to_entity",
    "location_to_entity",
    "stand_to_entity",
    "user_to_entity",
]
