"""Use cases for registering users to events."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import (
    PAYMENT_STATUS_FAILED,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_PENDING,
    Event,
    Participation,
    User,
)
from pulse.infrastructure.repositories import EventRepository, ParticipationRepository
from pulse.utils import now_in_app_timezone

from .notifications import notify_registration_confirmed, notify_unregistered

logger = logging.getLogger(__name__)


@dataclass
class RegistrationStatus:
    is_registered: bool
    requires_auth: bool
    payment_status: str | None = None


def _get_event(session: Session, event_id: int) -> Event:
    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Événement introuvable")
    return event


def register_for_event(session: Session, *, user: User, event_id: int) -> Participation:
    """Register ``user``; free events are settled at once, paid ones stay pending."""

    event = _get_event(session, event_id)
    if event.start_date < now_in_app_timezone():
        raise ValueError("Vous ne pouvez pas vous inscrire à un événement passé")

    repository = ParticipationRepository(session)
    existing = repository.get_for_user_and_event(user.id, event_id)
    if existing is not None:
        if existing.payment_status == PAYMENT_STATUS_FAILED:
            raise ValueError(
                "Votre paiement a échoué, relancez le paiement pour finaliser l'inscription"
            )
        raise ValueError("Vous êtes déjà inscrit à cet événement")

    participation = repository.create(
        Participation(
            id=None,
            user_id=user.id,
            event_id=event_id,
            payment_status=PAYMENT_STATUS_PENDING if event.is_paid else PAYMENT_STATUS_PAID,
            amount_paid=event.price,
        )
    )
    notify_registration_confirmed(session, user_id=user.id, event=event)
    logger.info("User %s registered to event %s", user.id, event_id)
    return participation


def unregister_from_event(session: Session, *, user: User, event_id: int) -> None:
    repository = ParticipationRepository(session)
    participation = repository.get_for_user_and_event(user.id, event_id)
    if participation is None:
        raise NotFoundError("Vous n'êtes pas inscrit à cet événement")

    event = participation.event or _get_event(session, event_id)
    if event.start_date < now_in_app_timezone():
        raise ValueError("Vous ne pouvez pas vous désinscrire d'un événement passé")

    repository.delete(participation.id)
    notify_unregistered(session, user_id=user.id, event=event)
    logger.info("User %s unregistered from event %s", user.id, event_id)


def get_registration_status(
    session: Session, *, user: User | None, event_id: int
) -> RegistrationStatus:
    if user is None:
        return RegistrationStatus(is_registered=False, requires_auth=True)
    participation = ParticipationRepository(session).get_for_user_and_event(
        user.id, event_id
    )
    return RegistrationStatus(
        is_registered=participation is not None,
        requires_auth=False,
        payment_status=participation.payment_status if participation else None,
    )


def list_event_participants(
    session: Session,
    *,
    event_id: int,
    skip: int = 0,
    limit: int = 20,
    search: str | None = None,
) -> tuple[Event, Sequence[Participation], int, int]:
    """Return the event, one page of participants, the page total and the overall count."""

    event = _get_event(session, event_id)
    repository = ParticipationRepository(session)
    participants, total = repository.list_for_event(
        event_id, skip=skip, limit=limit, search=search
    )
    return event, participants, total, repository.count_for_event(event_id)


__all__ = [
    "RegistrationStatus",
    "get_registration_status",
    "list_event_participants",
    "register_for_event",
    "unregister_from_event",
]
