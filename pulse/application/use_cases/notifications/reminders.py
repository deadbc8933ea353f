"""Scheduling and delivery of event reminders."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import (
    NOTIFICATION_TYPE_INFO,
    SCHEDULED_NOTIFICATION_TYPES,
    TRIGGER_OFFSETS,
    Event,
    Notification,
    ScheduledNotification,
)
from pulse.infrastructure.email import send_event_reminder_email
from pulse.infrastructure.repositories import (
    EventRepository,
    NotificationRepository,
    ScheduledNotificationRepository,
    UserRepository,
)
from pulse.utils import ensure_app_timezone

logger = logging.getLogger(__name__)

REMINDER_TITLE = "Rappel événement"
DEFAULT_ARTIST_LABEL = "Artiste"
DEFAULT_LOCATION_LABEL = "Lieu non spécifié"


def build_reminder_message(event: Event, delay_label: str) -> str:
    artist = event.artist.name if event.artist else DEFAULT_ARTIST_LABEL
    location = event.location.name if event.location else DEFAULT_LOCATION_LABEL
    return f"{artist} joue dans {delay_label}, {location}"


def schedule_event_reminders(
    session: Session, event: Event
) -> list[ScheduledNotification]:
    """Create the one hour and ten minutes reminders of a new event."""

    repository = ScheduledNotificationRepository(session)
    created = [
        repository.create(
            ScheduledNotification(
                id=None,
                event_id=event.id,
                type=trigger,
                title=REMINDER_TITLE,
                message=build_reminder_message(event, delay_label),
                scheduled_for=event.start_date - offset,
            )
        )
        for trigger, (offset, delay_label) in TRIGGER_OFFSETS.items()
    ]
    logger.info("Reminders scheduled for event %s", event.id)
    return created


def reschedule_event_reminders(session: Session, event: Event) -> int:
    """Move unsent reminders of ``event`` to follow its current start date.

    Reminders already sent are left untouched. Returns how many moved.
    """

    repository = ScheduledNotificationRepository(session)
    moved = 0
    for scheduled in repository.list_for_event(event.id):
        if scheduled.is_sent or scheduled.type not in TRIGGER_OFFSETS:
            continue
        offset, delay_label = TRIGGER_OFFSETS[scheduled.type]
        repository.update(
            replace(
                scheduled,
                scheduled_for=event.start_date - offset,
                message=build_reminder_message(event, delay_label),
            )
        )
        moved += 1
    return moved


def list_scheduled_notifications(
    session: Session,
    *,
    skip: int = 0,
    limit: int = 50,
    notification_type: str | None = None,
    is_sent: bool | None = None,
) -> tuple[Sequence[ScheduledNotification], int]:
    return ScheduledNotificationRepository(session).list(
        skip=skip, limit=limit, notification_type=notification_type, is_sent=is_sent
    )


def create_scheduled_notification(
    session: Session,
    *,
    event_id: int,
    notification_type: str,
    scheduled_for: datetime,
    title: str | None = None,
    message: str | None = None,
) -> ScheduledNotification:
    """Schedule a reminder by hand; the message defaults to the standard wording."""

    if notification_type not in SCHEDULED_NOTIFICATION_TYPES:
        raise ValueError("Type de notification planifiée invalide")
    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Événement introuvable")

    _, delay_label = TRIGGER_OFFSETS[notification_type]
    scheduled = ScheduledNotification(
        id=None,
        event_id=event_id,
        type=notification_type,
        title=(title or "").strip() or REMINDER_TITLE,
        message=(message or "").strip() or build_reminder_message(event, delay_label),
        scheduled_for=ensure_app_timezone(scheduled_for),
    )
    return ScheduledNotificationRepository(session).create(scheduled)


def _fire_reminder(
    session: Session, scheduled: ScheduledNotification, now: datetime
) -> int:
    event = scheduled.event or EventRepository(session).get(scheduled.event_id)
    if event is None:
        raise NotFoundError(f"Event {scheduled.event_id} not found")

    recipients = UserRepository(session).list_all()
    NotificationRepository(session).create_many(
        Notification(
            id=None,
            user_id=recipient.id,
            title=scheduled.title,
            message=scheduled.message,
            type=NOTIFICATION_TYPE_INFO,
            created_at=now,
        )
        for recipient in recipients
    )

    _, delay_label = TRIGGER_OFFSETS.get(scheduled.type, (None, "bientôt"))
    emailed = 0
    for recipient in recipients:
        if send_event_reminder_email(
            recipient.email,
            event_title=event.title,
            artist_name=event.artist.name if event.artist else None,
            location_name=event.location.name if event.location else None,
            start_date=event.start_date,
            delay_label=delay_label,
        ):
            emailed += 1

    ScheduledNotificationRepository(session).mark_sent(scheduled.id, now)
    logger.info(
        "Reminder %s for event %s delivered to %d user(s), %d e-mail(s) sent",
        scheduled.id,
        event.id,
        len(recipients),
        emailed,
    )
    return len(recipients)


def send_due_reminders(session: Session, now: datetime) -> int:
    """Fire every unsent reminder scheduled at or before ``now``.

    A reminder that fails is logged and stays unsent for the next run.
    Returns the number of reminders marked as sent.
    """

    sent = 0
    for scheduled in ScheduledNotificationRepository(session).list_due(now):
        try:
            _fire_reminder(session, scheduled, now)
        except Exception:
            session.rollback()
            logger.exception("Failed to send scheduled notification %s", scheduled.id)
            continue
        sent += 1
    return sent


__all__ = [
    "build_reminder_message",
    "create_scheduled_notification",
    "list_scheduled_notifications",
    "reschedule_event_reminders",
    "schedule_event_reminders",
    "send_due_reminders",
]
