"""Use cases behind the notification inbox of each user."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import NOTIFICATION_TYPES, Notification, User
from pulse.infrastructure.repositories import NotificationRepository, UserRepository
from pulse.utils import now_in_app_timezone


def list_notifications(
    session: Session, *, user: User, limit: int | None = 50
) -> Sequence[Notification]:
    """Return the notifications of ``user``, newest first."""

    return NotificationRepository(session).list_for_user(user.id, limit=limit)


def send_notification(
    session: Session,
    *,
    title: str,
    message: str,
    notification_type: str,
    user_id: int | None = None,
    send_to_all: bool = False,
) -> list[Notification]:
    """Create a notification for one user, or for every user when ``send_to_all``."""

    title = title.strip()
    message = message.strip()
    if not title or not message:
        raise ValueError("Le titre et le message sont requis")
    if notification_type not in NOTIFICATION_TYPES:
        raise ValueError("Type de notification invalide")

    users = UserRepository(session)
    if send_to_all:
        recipients = users.list_ids()
    elif user_id is not None:
        if users.get(user_id) is None:
            raise NotFoundError("Utilisateur introuvable")
        recipients = [user_id]
    else:
        raise ValueError("Un destinataire est requis")

    now = now_in_app_timezone()
    return NotificationRepository(session).create_many(
        Notification(
            id=None,
            user_id=recipient,
            title=title,
            message=message,
            type=notification_type,
            created_at=now,
        )
        for recipient in recipients
    )


def _get_owned_notification(
    repository: NotificationRepository, notification_id: int, requested_by: User
) -> Notification:
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFoundError("Notification introuvable")
    if notification.user_id != requested_by.id and not requested_by.is_admin():
        raise PermissionError("Accès non autorisé")
    return notification


def set_notification_read(
    session: Session, notification_id: int, *, read: bool, requested_by: User
) -> Notification:
    repository = NotificationRepository(session)
    notification = _get_owned_notification(repository, notification_id, requested_by)
    if read and notification.read_at is None:
        notification = replace(notification, read_at=now_in_app_timezone())
    elif not read:
        notification = replace(notification, read_at=None)
    return repository.update(notification)


def delete_notification(
    session: Session, notification_id: int, *, requested_by: User
) -> None:
    repository = NotificationRepository(session)
    _get_owned_notification(repository, notification_id, requested_by)
    repository.delete(notification_id)


__all__ = [
    "delete_notification",
    "list_notifications",
    "send_notification",
    "set_notification_read",
]
