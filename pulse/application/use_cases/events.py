"""Use cases for managing events."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import (
    DEFAULT_CURRENCY,
    EVENT_GENRES,
    EVENT_TYPES,
    Event,
)
from pulse.infrastructure.repositories import (
    ArtistRepository,
    EventRepository,
    LocationRepository,
)
from pulse.utils import day_bounds, ensure_app_timezone, now_in_app_timezone

from .notifications import reschedule_event_reminders, schedule_event_reminders

logger = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 3
MIN_DESCRIPTION_LENGTH = 10
EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "start_date",
        "genre",
        "type",
        "location_id",
        "artist_id",
        "image_path",
        "price",
        "currency",
    }
)


def _validate_event(
    session: Session, event: Event, *, require_future: bool = True
) -> Event:
    """Return ``event`` normalized, raising ``ValueError`` on invalid data."""

    title = (event.title or "").strip()
    if len(title) < MIN_TITLE_LENGTH:
        raise ValueError(
            "Le titre de l'événement est requis et doit contenir au moins 3 caractères"
        )
    description = (event.description or "").strip()
    if len(description) < MIN_DESCRIPTION_LENGTH:
        raise ValueError(
            "La description est requise et doit contenir au moins 10 caractères"
        )
    if event.start_date is None:
        raise ValueError("La date de début est requise")
    if event.genre not in EVENT_GENRES:
        raise ValueError("Le genre musical est requis et doit être valide")
    if event.type not in EVENT_TYPES:
        raise ValueError("Le type d'événement est requis et doit être valide")
    if event.price is None or event.price < 0:
        raise ValueError("Le prix doit être positif ou nul")

    start_date = ensure_app_timezone(event.start_date)
    if require_future and start_date <= now_in_app_timezone():
        raise ValueError("La date de début doit être dans le futur")

    if event.location_id is None:
        raise ValueError("Le lieu est requis et doit être valide")
    if not LocationRepository(session).exists(event.location_id):
        raise ValueError("Le lieu sélectionné n'existe pas")

    if event.artist_id is not None:
        artist = ArtistRepository(session).get(event.artist_id)
        if artist is None:
            raise ValueError("L'artiste sélectionné n'existe pas")
        start_of_day, end_of_day = day_bounds(start_date)
        clash = EventRepository(session).find_artist_event_between(
            artist.id, start_of_day, end_of_day, exclude_event_id=event.id
        )
        if clash is not None:
            msg = (
                f"L'artiste {artist.name} est déjà programmé le "
                f"{start_of_day.strftime('%d/%m/%Y')} pour l'événement \"{clash.title}\""
            )
            raise ValueError(msg)

    image_path = event.image_path.strip() if event.image_path else None
    currency = (event.currency or DEFAULT_CURRENCY).strip().upper()
    return replace(
        event,
        title=title,
        description=description,
        start_date=start_date,
        image_path=image_path or None,
        currency=currency,
    )


def list_events(
    session: Session,
    *,
    skip: int = 0,
    limit: int = 20,
    search: str | None = None,
    genre: str | None = None,
    event_type: str | None = None,
    artist_id: int | None = None,
    upcoming: bool = False,
) -> tuple[Sequence[Event], int]:
    """Return one page of events ordered by start date and the total match count."""

    return EventRepository(session).list(
        skip=skip,
        limit=limit,
        search=search,
        genre=genre,
        event_type=event_type,
        artist_id=artist_id,
        starting_after=now_in_app_timezone() if upcoming else None,
    )


def get_event(session: Session, event_id: int) -> Event:
    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Événement introuvable")
    return event


def create_event(
    session: Session,
    *,
    title: str,
    description: str,
    start_date: datetime,
    genre: str,
    type: str,
    location_id: int | None,
    artist_id: int | None = None,
    image_path: str | None = None,
    price: float = 0.0,
    currency: str = DEFAULT_CURRENCY,
) -> Event:
    """Create an event in the future and schedule its two reminders."""

    event = _validate_event(
        session,
        Event(
            id=None,
            title=title,
            description=description,
            start_date=start_date,
            genre=genre,
            type=type,
            location_id=location_id,
            artist_id=artist_id,
            image_path=image_path,
            price=price,
            currency=currency,
        ),
    )
    created = EventRepository(session).create(event)
    schedule_event_reminders(session, created)
    logger.info("Event %s created for %s", created.id, created.start_date.isoformat())
    return created


def update_event(session: Session, event_id: int, *, changes: Mapping[str, Any]) -> Event:
    """Apply ``changes`` and move pending reminders when the date changes.

    The future-date rule only applies when ``start_date`` is part of the
    changes, so past events stay editable.
    """

    repository = EventRepository(session)
    current = repository.get(event_id)
    if current is None:
        raise NotFoundError("Événement introuvable")

    updated = replace(
        current,
        **{key: value for key, value in changes.items() if key in EDITABLE_FIELDS},
    )
    updated = _validate_event(
        session, updated, require_future="start_date" in changes
    )
    saved = repository.update(updated)

    if (
        saved.start_date != current.start_date
        or saved.artist_id != current.artist_id
        or saved.location_id != current.location_id
    ):
        reschedule_event_reminders(session, saved)
    return saved


def delete_event(session: Session, event_id: int) -> None:
    """Delete the event with its participations and reminders."""

    repository = EventRepository(session)
    if repository.get(event_id) is None:
        raise NotFoundError("Événement introuvable")
    repository.delete(event_id)
    logger.info("Event %s deleted", event_id)


__all__ = [
    "create_event",
    "delete_event",
    "get_event",
    "list_events",
    "update_event",
]
