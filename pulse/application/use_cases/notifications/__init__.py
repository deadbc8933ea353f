"""Public helpers for emitting, reading and scheduling notifications."""

from .events import (
    notify_payment_failed,
    notify_payment_succeeded,
    notify_registration_confirmed,
    notify_unregistered,
)
from .inbox import (
    delete_notification,
    list_notifications,
    send_notification,
    set_notification_read,
)
from .reminders import (
    build_reminder_message,
    create_scheduled_notification,
    list_scheduled_notifications,
    reschedule_event_reminders,
    schedule_event_reminders,
    send_due_reminders,
)

__all__ = [
    "build_reminder_message",
    "create_scheduled_notification",
    "delete_notification",
    "list_notifications",
    "list_scheduled_notifications",
    "notify_payment_failed",
    "notify_payment_succeeded",
    "notify_registration_confirmed",
    "notify_unregistered",
    "reschedule_event_reminders",
    "schedule_event_reminders",
    "send_due_reminders",
    "send_notification",
    "set_notification_read",
]
