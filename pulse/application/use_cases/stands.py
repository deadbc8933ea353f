"""Use cases for managing stands."""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import STAND_TYPES, Stand
from pulse.infrastructure.repositories import (
    EventRepository,
    LocationRepository,
    StandRepository,
)
from pulse.utils import ensure_app_timezone


def _validate(session: Session, stand: Stand) -> Stand:
    name = (stand.name or "").strip()
    description = (stand.description or "").strip()
    if not name:
        raise ValueError("Le nom du stand est requis")
    if not description:
        raise ValueError("La description du stand est requise")
    if stand.type not in STAND_TYPES:
        raise ValueError("Le type de stand est invalide")
    if stand.location_id is None:
        raise ValueError("Le lieu est requis")
    if not LocationRepository(session).exists(stand.location_id):
        raise ValueError("Le lieu sélectionné n'existe pas")
    if stand.event_id is not None and EventRepository(session).get(stand.event_id) is None:
        raise ValueError("L'événement sélectionné n'existe pas")

    if stand.opened_at is None or stand.closed_at is None:
        raise ValueError("Les horaires d'ouverture et de fermeture sont requis")
    opened_at = ensure_app_timezone(stand.opened_at)
    closed_at = ensure_app_timezone(stand.closed_at)
    if closed_at <= opened_at:
        raise ValueError("L'heure de fermeture doit être postérieure à l'ouverture")
    return replace(
        stand,
        name=name,
        description=description,
        opened_at=opened_at,
        closed_at=closed_at,
    )


def list_stands(session: Session) -> Sequence[Stand]:
    return StandRepository(session).list()


def get_stand(session: Session, stand_id: int) -> Stand:
    stand = StandRepository(session).get(stand_id)
    if stand is None:
        raise NotFoundError("Stand introuvable")
    return stand


def create_stand(
    session: Session,
    *,
    name: str,
    description: str,
    type: str,
    location_id: int,
    opened_at: datetime,
    closed_at: datetime,
    event_id: int | None = None,
) -> Stand:
    stand = _validate(
        session,
        Stand(
            id=None,
            name=name,
            description=description,
            type=type,
            location_id=location_id,
            opened_at=opened_at,
            closed_at=closed_at,
            event_id=event_id,
        ),
    )
    return StandRepository(session).create(stand)


def update_stand(session: Session, stand_id: int, *, changes: Mapping[str, Any]) -> Stand:
    repository = StandRepository(session)
    stand = repository.get(stand_id)
    if stand is None:
        raise NotFoundError("Stand introuvable")

    allowed = {
        "name",
        "description",
        "type",
        "location_id",
        "event_id",
        "opened_at",
        "closed_at",
    }
    stand = _validate(
        session,
        replace(stand, **{key: value for key, value in changes.items() if key in allowed}),
    )
    return repository.update(stand)


def delete_stand(session: Session, stand_id: int) -> None:
    repository = StandRepository(session)
    if repository.get(stand_id) is None:
        raise NotFoundError("Stand introuvable")
    repository.delete(stand_id)


__all__ = [
    "create_stand",
    "delete_stand",
    "get_stand",
    "list_stands",
    "update_stand",
]
