"""Stripe integration for payment intents and webhook parsing."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

import stripe

from pulse.config import Settings, get_settings

logger = logging.getLogger(__name__)


class PaymentGatewayError(RuntimeError):
    """Raised when the payment provider cannot fulfil a request."""


class WebhookVerificationError(ValueError):
    """Raised when a webhook payload is unsigned, forged or malformed."""


@dataclass(frozen=True)
class PaymentIntentHandle:
    id: str
    client_secret: str


@dataclass(frozen=True)
class GatewayEvent:
    """Minimal view of a webhook event: its id, its type and the object id."""

    id: str
    type: str
    object_id: str | None


class PaymentGateway(Protocol):
    def create_payment_intent(
        self, *, amount: int, currency: str, metadata: dict[str, str]
    ) -> PaymentIntentHandle: ...

    def parse_webhook(self, payload: bytes, signature: str) -> GatewayEvent: ...


class StripePaymentGateway:
    """Payment gateway backed by the Stripe SDK."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def create_payment_intent(
        self, *, amount: int, currency: str, metadata: dict[str, str]
    ) -> PaymentIntentHandle:
        if not self.settings.stripe_secret_key:
            raise PaymentGatewayError("Stripe secret key is not configured")
        try:
            intent = stripe.PaymentIntent.create(
                amount=amount,
                currency=currency,
                metadata=metadata,
                automatic_payment_methods={"enabled": True},
                api_key=self.settings.stripe_secret_key,
            )
        except stripe.StripeError as exc:
            logger.error("Stripe refused to create a payment intent: %s", exc)
            raise PaymentGatewayError(str(exc)) from exc
        return PaymentIntentHandle(id=intent.id, client_secret=intent.client_secret)

    def parse_webhook(self, payload: bytes, signature: str) -> GatewayEvent:
        secret = self.settings.stripe_webhook_secret
        if secret:
            try:
                event = stripe.Webhook.construct_event(
                    payload=payload, sig_header=signature, secret=secret
                )
            except stripe.SignatureVerificationError as exc:
                raise WebhookVerificationError("Invalid webhook signature") from exc
            except ValueError as exc:
                raise WebhookVerificationError("Invalid webhook payload") from exc
            return _to_gateway_event(event)

        logger.warning(
            "STRIPE_WEBHOOK_SECRET is not set; accepting webhook without verification"
        )
        try:
            data = json.loads(payload)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise WebhookVerificationError("Invalid webhook payload") from exc
        return _to_gateway_event(data)


def _to_gateway_event(data: Any) -> GatewayEvent:
    try:
        event_id = data["id"]
        event_type = data["type"]
    except (KeyError, TypeError) as exc:
        raise WebhookVerificationError("Invalid webhook payload") from exc
    if not isinstance(event_id, str) or not isinstance(event_type, str):
        raise WebhookVerificationError("Invalid webhook payload")

    try:
        object_id = data["data"]["object"]["id"]
    except (KeyError, TypeError):
        object_id = None
    return GatewayEvent(
        id=event_id,
        type=event_type,
        object_id=object_id if isinstance(object_id, str) else None,
    )


def get_payment_gateway() -> PaymentGateway:
    """FastAPI dependency returning the configured gateway."""

    return StripePaymentGateway()


__all__ = [
    "GatewayEvent",
    "PaymentGateway",
    "PaymentGatewayError",
    "PaymentIntentHandle",
    "StripePaymentGateway",
    "WebhookVerificationError",
    "get_payment_gateway",
]
