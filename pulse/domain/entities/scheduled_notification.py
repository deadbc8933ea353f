"""Domain entity for event reminders fired by the scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from .event import Event

TRIGGER_ONE_HOUR_BEFORE = "ONE_HOUR_BEFORE"
TRIGGER_TEN_MINUTES_BEFORE = "TEN_MINUTES_BEFORE"

# Offset subtracted from the event start for each trigger, plus the human
# readable delay used in messages.
TRIGGER_OFFSETS: dict[str, tuple[timedelta, str]] = {
    TRIGGER_ONE_HOUR_BEFORE: (timedelta(minutes=60), "1h"),
    TRIGGER_TEN_MINUTES_BEFORE: (timedelta(minutes=10), "10min"),
}
SCHEDULED_NOTIFICATION_TYPES = tuple(TRIGGER_OFFSETS)


@dataclass
class ScheduledNotification:
    """Reminder tied to an event start date."""

    id: int | None
    event_id: int
    type: str
    title: str
    message: str
    scheduled_for: datetime
    is_sent: bool = False
    sent_at: datetime | None = None
    created_at: datetime | None = None
    event: Event | None = None


__all__ = [
    "SCHEDULED_NOTIFICATION_TYPES",
    "TRIGGER_OFFSETS",
    "TRIGGER_ONE_HOUR_BEFORE",
    "TRIGGER_TEN_MINUTES_BEFORE",
    "ScheduledNotification",
]
