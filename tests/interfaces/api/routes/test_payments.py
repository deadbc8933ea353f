"""Tests for payment intents and Stripe webhook reconciliation."""

from __future__ import annotations

import hashlib
import hmac
import json
import time

import pytest
from fastapi.testclient import TestClient

from conftest import FakePaymentGateway, auth_headers, create_user, event_payload
from pulse.application.use_cases import payments as payments_module
from pulse.config import get_settings
from pulse.infrastructure.database import SessionLocal
from pulse.infrastructure.models import ParticipationModel
from pulse.infrastructure.payments import GatewayEvent, get_payment_gateway
from pulse.infrastructure.repositories import ParticipationRepository

WEBHOOK_SECRET = "whsec_test_secret"


def _paid_event(client: TestClient, headers, location_id: int, price: float = 25.5) -> dict:
    response = client.post(
        "/api/events", json=event_payload(location_id, price=price), headers=headers
    )
    assert response.status_code == 201
    return response.json()


def _webhook_body(event_id: str, event_type: str, intent_id: str) -> bytes:
    return json.dumps(
        {
            "id": event_id,
            "object": "event",
            "type": event_type,
            "data": {"object": {"id": intent_id, "object": "payment_intent"}},
        }
    ).encode()


def _sign(payload: bytes, secret: str = WEBHOOK_SECRET) -> str:
    timestamp = int(time.time())
    signed = f"{timestamp}.{payload.decode()}".encode()
    signature = hmac.new(secret.encode(), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


def _participation(user_id: int, event_id: int):
    with SessionLocal() as session:
        return ParticipationRepository(session).get_for_user_and_event(user_id, event_id)


def _titles(client: TestClient, headers) -> list[str]:
    return [item["title"] for item in client.get("/api/notifications", headers=headers).json()]


def test_create_payment_intent_for_paid_event(
    client: TestClient, admin_headers, member_headers, member, location_id, payment_gateway
) -> None:
    event = _paid_event(client, admin_headers, location_id)

    response = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    )

    assert response.status_code == 200
    assert response.json() == {
        "client_secret": "pi_test_1_secret",
        "payment_intent_id": "pi_test_1",
    }
    assert payment_gateway.created[0]["amount"] == 2550
    assert payment_gateway.created[0]["currency"] == "eur"
    assert payment_gateway.created[0]["metadata"]["event_id"] == str(event["id"])
    participation = _participation(member.id, event["id"])
    assert participation.payment_status == "PENDING"
    assert participation.payment_intent_id == "pi_test_1"


def test_payment_intent_rejects_free_event(
    client: TestClient, admin_headers, member_headers, location_id
) -> None:
    event = _paid_event(client, admin_headers, location_id, price=0)

    response = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    )

    assert response.status_code == 400


def test_payment_intent_validates_event_id(client: TestClient, member_headers) -> None:
    assert (
        client.post(
            "/api/create-payment-intent", json={"eventId": 0}, headers=member_headers
        ).status_code
        == 400
    )
    assert (
        client.post(
            "/api/create-payment-intent", json={"eventId": 999}, headers=member_headers
        ).status_code
        == 404
    )


def test_pending_participation_is_reused_with_the_new_intent(
    client: TestClient, admin_headers, member_headers, member, location_id
) -> None:
    event = _paid_event(client, admin_headers, location_id)
    client.post(f"/api/events/{event['id']}/register", headers=member_headers)

    first = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    )
    second = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    )

    assert first.status_code == second.status_code == 200
    participation = _participation(member.id, event["id"])
    assert participation.payment_status == "PENDING"
    assert participation.payment_intent_id == second.json()["payment_intent_id"]
    with SessionLocal() as session:
        assert ParticipationRepository(session).count_for_event(event["id"]) == 1


def test_webhook_success_marks_participation_paid_once(
    client: TestClient, admin_headers, member_headers, member, location_id
) -> None:
    event = _paid_event(client, admin_headers, location_id)
    intent = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    ).json()
    body = _webhook_body("evt_1", "payment_intent.succeeded", intent["payment_intent_id"])

    first = client.post(
        "/api/webhook/stripe", content=body, headers={"Stripe-Signature": "unsigned"}
    )
    replay = client.post(
        "/api/webhook/stripe", content=body, headers={"Stripe-Signature": "unsigned"}
    )

    assert first.json() == {"received": True, "duplicate": False}
    assert replay.json() == {"received": True, "duplicate": True}
    assert _participation(member.id, event["id"]).payment_status == "PAID"
    assert _titles(client, member_headers).count("Paiement confirmé") == 1

    again = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    )
    assert again.status_code == 400


def test_failed_payment_can_be_retried(
    client: TestClient, admin_headers, member_headers, member, location_id
) -> None:
    event = _paid_event(client, admin_headers, location_id)
    intent = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    ).json()
    client.post(
        "/api/webhook/stripe",
        content=_webhook_body(
            "evt_fail", "payment_intent.payment_failed", intent["payment_intent_id"]
        ),
        headers={"Stripe-Signature": "unsigned"},
    )
    assert _participation(member.id, event["id"]).payment_status == "FAILED"

    retry = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    )

    assert retry.status_code == 200
    participation = _participation(member.id, event["id"])
    assert participation.payment_status == "PENDING"
    assert participation.payment_intent_id == retry.json()["payment_intent_id"]


def test_failed_payment_webhook_notifies_once(
    client: TestClient, admin_headers, member_headers, member, location_id
) -> None:
    event = _paid_event(client, admin_headers, location_id)
    intent = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    ).json()
    body = _webhook_body(
        "evt_failed_once", "payment_intent.payment_failed", intent["payment_intent_id"]
    )

    for _ in range(2):
        response = client.post(
            "/api/webhook/stripe", content=body, headers={"Stripe-Signature": "unsigned"}
        )
        assert response.status_code == 200

    assert _participation(member.id, event["id"]).payment_status == "FAILED"
    assert _titles(client, member_headers).count("Échec du paiement") == 1


def test_shared_intent_marks_every_participation_paid(
    client: TestClient, admin_headers, member_headers, member, location_id
) -> None:
    event = _paid_event(client, admin_headers, location_id)
    intent = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    ).json()
    guest = create_user(username="bruno", email="bruno@pulse.fr")
    with SessionLocal() as session:
        session.add(
            ParticipationModel(
                user_id=guest.id,
                event_id=event["id"],
                payment_status="PENDING",
                payment_intent_id=intent["payment_intent_id"],
                amount_paid=25.5,
            )
        )
        session.commit()

    response = client.post(
        "/api/webhook/stripe",
        content=_webhook_body(
            "evt_shared", "payment_intent.succeeded", intent["payment_intent_id"]
        ),
        headers={"Stripe-Signature": "unsigned"},
    )

    assert response.status_code == 200
    assert _participation(member.id, event["id"]).payment_status == "PAID"
    assert _participation(guest.id, event["id"]).payment_status == "PAID"
    confirmations = _titles(client, member_headers) + _titles(client, auth_headers(guest))
    assert confirmations.count("Paiement confirmé") == 1


def test_reconcile_failure_leaves_event_for_redelivery(
    client: TestClient, admin_headers, member_headers, member, location_id, monkeypatch
) -> None:
    event = _paid_event(client, admin_headers, location_id)
    intent = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    ).json()
    gateway_event = GatewayEvent(
        id="evt_retry",
        type=payments_module.PAYMENT_SUCCEEDED,
        object_id=intent["payment_intent_id"],
    )

    def _broken_notify(*args, **kwargs):
        raise RuntimeError("notification store unavailable")

    monkeypatch.setattr(payments_module, "notify_payment_succeeded", _broken_notify)
    with SessionLocal() as session, pytest.raises(RuntimeError):
        payments_module.handle_payment_webhook(session, gateway_event)

    monkeypatch.undo()
    redelivery = client.post(
        "/api/webhook/stripe",
        content=_webhook_body(
            "evt_retry", "payment_intent.succeeded", intent["payment_intent_id"]
        ),
        headers={"Stripe-Signature": "unsigned"},
    )

    assert redelivery.json() == {"received": True, "duplicate": False}
    assert _participation(member.id, event["id"]).payment_status == "PAID"
    assert _titles(client, member_headers).count("Paiement confirmé") == 1


def test_claimed_event_id_is_not_processed_again(
    client: TestClient, admin_headers, member_headers, member, location_id
) -> None:
    event = _paid_event(client, admin_headers, location_id)
    intent = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    ).json()
    with SessionLocal() as session:
        claimed = GatewayEvent(
            id="evt_claimed", type="charge.refunded", object_id="ch_1"
        )
        assert payments_module.handle_payment_webhook(session, claimed) is True

    response = client.post(
        "/api/webhook/stripe",
        content=_webhook_body(
            "evt_claimed", "payment_intent.succeeded", intent["payment_intent_id"]
        ),
        headers={"Stripe-Signature": "unsigned"},
    )

    assert response.json() == {"received": True, "duplicate": True}
    assert _participation(member.id, event["id"]).payment_status == "PENDING"



def test_webhook_requires_signature_header(client: TestClient) -> None:
    response = client.post(
        "/api/webhook/stripe",
        content=_webhook_body("evt_2", "payment_intent.succeeded", "pi_unknown"),
    )

    assert response.status_code == 400


def test_unknown_event_type_is_acknowledged(client: TestClient) -> None:
    response = client.post(
        "/api/webhook/stripe",
        content=_webhook_body("evt_3", "charge.refunded", "ch_1"),
        headers={"Stripe-Signature": "unsigned"},
    )

    assert response.status_code == 200
    assert response.json()["received"] is True


def test_signed_webhook_is_verified(
    app, client: TestClient, admin_headers, member_headers, member, location_id
) -> None:
    signed_gateway = FakePaymentGateway(
        get_settings().model_copy(update={"stripe_webhook_secret": WEBHOOK_SECRET})
    )
    app.dependency_overrides[get_payment_gateway] = lambda: signed_gateway
    event = _paid_event(client, admin_headers, location_id)
    intent = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    ).json()
    body = _webhook_body("evt_signed", "payment_intent.succeeded", intent["payment_intent_id"])

    forged = client.post(
        "/api/webhook/stripe",
        content=body,
        headers={"Stripe-Signature": _sign(body, "whsec_other")},
    )
    assert forged.status_code == 400
    assert _participation(member.id, event["id"]).payment_status == "PENDING"

    genuine = client.post(
        "/api/webhook/stripe", content=body, headers={"Stripe-Signature": _sign(body)}
    )
    assert genuine.status_code == 200
    assert _participation(member.id, event["id"]).payment_status == "PAID"
