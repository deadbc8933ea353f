"""Routes de paiement : création d'intention et webhook Stripe."""

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from pulse.application.use_cases.payments import (
    create_payment_intent as create_payment_intent_uc,
    handle_payment_webhook,
)
from pulse.domain.entities import User
from pulse.infrastructure.database import get_db
from pulse.infrastructure.payments import PaymentGateway, get_payment_gateway
from pulse.interfaces.api.dependencies import get_current_user
from pulse.interfaces.api.routes_helpers import translate_errors
from pulse.interfaces.api.schemas import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    WebhookAck,
)

router = APIRouter(tags=["payments"])
logger = logging.getLogger(__name__)


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent(
    payload: PaymentIntentRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    """Crée une intention de paiement pour un événement payant."""

    with translate_errors():
        intent = create_payment_intent_uc(
            db, user=current_user, event_id=payload.event_id, gateway=gateway
        )
    return PaymentIntentResponse(
        client_secret=intent.client_secret, payment_intent_id=intent.id
    )


@router.post("/webhook/stripe", response_model=WebhookAck)
async def stripe_webhook(
    request: Request,
    stripe_signature: str | None = Header(default=None, alias="Stripe-Signature"),
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    """Réconcilie les participations à partir des événements Stripe."""

    if not stripe_signature:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Signature manquante"
        )

    payload = await request.body()
    with translate_errors():
        event = gateway.parse_webhook(payload, stripe_signature)
    processed = await run_in_threadpool(handle_payment_webhook, db, event)
    logger.info("Webhook %s (%s) handled, new=%s", event.id, event.type, processed)
    return WebhookAck(received=True, duplicate=not processed)
