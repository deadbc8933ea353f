"""Domain entity describing a user's registration to an event."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .event import Event
from .user import User

PAYMENT_STATUS_PENDING = "PENDING"
PAYMENT_STATUS_PAID = "PAID"
PAYMENT_STATUS_FAILED = "FAILED"
PAYMENT_STATUSES = (
    PAYMENT_STATUS_PENDING,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_FAILED,
)


@dataclass
class Participation:
    """Registration and payment state of a user for one event."""

    id: int | None
    user_id: int
    event_id: int
    payment_status: str
    payment_intent_id: str | None = None
    amount_paid: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    event: Event | None = None
    user: User | None = None

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PAYMENT_STATUS_PAID


__all__ = [
    "PAYMENT_STATUS_FAILED",
    "PAYMENT_STATUS_PAID",
    "PAYMENT_STATUS_PENDING",
    "PAYMENT_STATUSES",
    "Participation",
]
