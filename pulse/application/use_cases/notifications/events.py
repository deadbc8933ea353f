"""Notifications emitted as a side effect of registrations and payments."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from pulse.domain.entities import (
    NOTIFICATION_TYPE_ERROR,
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    Event,
    Notification,
)
from pulse.infrastructure.repositories import NotificationRepository
from pulse.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def _persist_notification(
    session: Session,
    *,
    user_id: int,
    title: str,
    message: str,
    notification_type: str = NOTIFICATION_TYPE_INFO,
) -> Notification:
    notification = Notification(
        id=None,
        user_id=user_id,
        title=title,
        message=message,
        type=notification_type,
        created_at=now_in_app_timezone(),
        read_at=None,
    )
    saved = NotificationRepository(session).create(notification)
    logger.debug("Notification %s stored for user %s", saved.id, user_id)
    return saved


def notify_registration_confirmed(
    session: Session, *, user_id: int, event: Event
) -> Notification:
    return _persist_notification(
        session,
        user_id=user_id,
        title="Inscription confirmée",
        message=f'Vous êtes inscrit à l\'événement "{event.title}"',
        notification_type=NOTIFICATION_TYPE_SUCCESS,
    )


def notify_unregistered(session: Session, *, user_id: int, event: Event) -> Notification:
    return _persist_notification(
        session,
        user_id=user_id,
        title="Désinscription confirmée",
        message=f'Vous êtes désinscrit de l\'événement "{event.title}"',
        notification_type=NOTIFICATION_TYPE_INFO,
    )


def notify_payment_succeeded(
    session: Session, *, user_id: int, event_title: str
) -> Notification:
    return _persist_notification(
        session,
        user_id=user_id,
        title="Paiement confirmé",
        message=(
            f'Votre paiement pour "{event_title}" a été confirmé. '
            "Vous êtes maintenant inscrit !"
        ),
        notification_type=NOTIFICATION_TYPE_SUCCESS,
    )


def notify_payment_failed(
    session: Session, *, user_id: int, event_title: str
) -> Notification:
    return _persist_notification(
        session,
        user_id=user_id,
        title="Échec du paiement",
        message=f'Le paiement pour "{event_title}" a échoué. Veuillez réessayer.',
        notification_type=NOTIFICATION_TYPE_ERROR,
    )


__all__ = [
    "notify_payment_failed",
    "notify_payment_succeeded",
    "notify_registration_confirmed",
    "notify_unregistered",
]
