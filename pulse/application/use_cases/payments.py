"""Payment intent issuance and webhook reconciliation."""

from __future__ import annotations

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import (
    PAYMENT_STATUS_FAILED,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_PENDING,
    Participation,
    User,
)
from pulse.infrastructure.payments import GatewayEvent, PaymentGateway, PaymentIntentHandle
from pulse.infrastructure.repositories import (
    EventRepository,
    ParticipationRepository,
    ProcessedWebhookEventRepository,
)

from .notifications import notify_payment_failed, notify_payment_succeeded

logger = logging.getLogger(__name__)

PAYMENT_SUCCEEDED = "payment_intent.succeeded"
PAYMENT_FAILED = "payment_intent.payment_failed"


def to_minor_units(price: float) -> int:
    return int(round(price * 100))


def create_payment_intent(
    session: Session, *, user: User, event_id: int, gateway: PaymentGateway
) -> PaymentIntentHandle:
    """Open a payment intent for ``user`` and keep one participation per event.

    A pending participation is reused with the new intent and a failed one is
    reset to pending. Users who already paid are rejected.
    """

    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Événement introuvable")
    if not event.is_paid:
        raise ValueError("Cet événement est gratuit")

    repository = ParticipationRepository(session)
    existing = repository.get_for_user_and_event(user.id, event_id)
    if existing is not None and existing.payment_status == PAYMENT_STATUS_PAID:
        raise ValueError("Vous êtes déjà inscrit à cet événement")

    amount = to_minor_units(event.price)
    intent = gateway.create_payment_intent(
        amount=amount,
        currency=event.currency.lower(),
        metadata={
            "event_id": str(event.id),
            "user_id": str(user.id),
            "event_title": event.title,
        },
    )

    if existing is not None:
        repository.update(
            replace(
                existing,
                payment_status=PAYMENT_STATUS_PENDING,
                payment_intent_id=intent.id,
                amount_paid=event.price,
            )
        )
        logger.info(
            "Payment intent %s replaces %s for user %s on event %s",
            intent.id,
            existing.payment_intent_id,
            user.id,
            event_id,
        )
    else:
        repository.create(
            Participation(
                id=None,
                user_id=user.id,
                event_id=event_id,
                payment_status=PAYMENT_STATUS_PENDING,
                payment_intent_id=intent.id,
                amount_paid=event.price,
            )
        )
        logger.info(
            "Payment intent %s created for user %s on event %s (%d)",
            intent.id,
            user.id,
            event_id,
            amount,
        )
    return intent


def _reconcile(session: Session, intent_id: str, status: str) -> None:
    repository = ParticipationRepository(session)
    updated = repository.update_status_by_intent(intent_id, status)
    if not updated:
        logger.warning("No participation matches payment intent %s", intent_id)
        return

    participation = repository.get_first_by_intent(intent_id)
    if participation is None:
        return
    event_title = participation.event.title if participation.event else ""
    if status == PAYMENT_STATUS_PAID:
        notify_payment_succeeded(
            session, user_id=participation.user_id, event_title=event_title
        )
    else:
        notify_payment_failed(
            session, user_id=participation.user_id, event_title=event_title
        )
    logger.info(
        "Payment intent %s marked %s on %d participation(s)", intent_id, status, updated
    )


def handle_payment_webhook(session: Session, event: GatewayEvent) -> bool:
    """Apply a gateway event once; return ``False`` for an already handled delivery."""

    processed = ProcessedWebhookEventRepository(session)
    if not processed.record(event.id, event.type):
        logger.info("Webhook event %s already processed", event.id)
        return False

    try:
        if event.type == PAYMENT_SUCCEEDED and event.object_id:
            _reconcile(session, event.object_id, PAYMENT_STATUS_PAID)
        elif event.type == PAYMENT_FAILED and event.object_id:
            _reconcile(session, event.object_id, PAYMENT_STATUS_FAILED)
        else:
            logger.info("Unhandled webhook event type %s", event.type)
    except Exception:
        session.rollback()
        # Release the claim so the gateway redelivery is processed.
        processed.delete(event.id)
        raise
    return True


__all__ = [
    "PAYMENT_FAILED",
    "PAYMENT_SUCCEEDED",
    "create_payment_intent",
    "handle_payment_webhook",
    "to_minor_units",
]
