"""Tests for event registration and participant listings."""

from __future__ import annotations

import json

from fastapi.testclient import TestClient

from conftest import auth_headers, create_user, event_payload, future_start, insert_event


def _create_event(client: TestClient, headers, location_id: int, **overrides) -> dict:
    response = client.post(
        "/api/events", json=event_payload(location_id, **overrides), headers=headers
    )
    assert response.status_code == 201
    return response.json()


def test_free_event_registration_is_paid_immediately(
    client: TestClient, admin_headers, member_headers, member, location_id
) -> None:
    event = _create_event(client, admin_headers, location_id)

    response = client.post(f"/api/events/{event['id']}/register", headers=member_headers)

    assert response.status_code == 201
    assert response.json()["participation"]["payment_status"] == "PAID"

    status_response = client.get(
        f"/api/events/{event['id']}/register", headers=member_headers
    )
    assert status_response.json() == {
        "is_registered": True,
        "requires_auth": False,
        "payment_status": "PAID",
    }

    notifications = client.get("/api/notifications", headers=member_headers).json()
    assert [item["title"] for item in notifications] == ["Inscription confirmée"]

    events = client.get(f"/api/users/{member.id}/events", headers=member_headers).json()
    assert [item["event"]["id"] for item in events] == [event["id"]]


def test_paid_event_registration_stays_pending(
    client: TestClient, admin_headers, member_headers, location_id
) -> None:
    event = _create_event(client, admin_headers, location_id, price=25)

    response = client.post(f"/api/events/{event['id']}/register", headers=member_headers)

    assert response.status_code == 201
    assert response.json()["participation"]["payment_status"] == "PENDING"


def test_double_registration_is_rejected(
    client: TestClient, admin_headers, member_headers, location_id
) -> None:
    event = _create_event(client, admin_headers, location_id)
    client.post(f"/api/events/{event['id']}/register", headers=member_headers)

    response = client.post(f"/api/events/{event['id']}/register", headers=member_headers)

    assert response.status_code == 400


def test_registration_after_failed_payment_points_to_retry(
    client: TestClient, admin_headers, member_headers, location_id
) -> None:
    event = _create_event(client, admin_headers, location_id, price=25)
    intent = client.post(
        "/api/create-payment-intent", json={"eventId": event["id"]}, headers=member_headers
    ).json()
    client.post(
        "/api/webhook/stripe",
        content=json.dumps(
            {
                "id": "evt_registration_failed",
                "object": "event",
                "type": "payment_intent.payment_failed",
                "data": {"object": {"id": intent["payment_intent_id"]}},
            }
        ),
        headers={"Stripe-Signature": "unsigned"},
    )

    response = client.post(f"/api/events/{event['id']}/register", headers=member_headers)

    assert response.status_code == 400
    assert "relancez le paiement" in response.json()["detail"]
    status_response = client.get(
        f"/api/events/{event['id']}/register", headers=member_headers
    )
    assert status_response.json()["payment_status"] == "FAILED"


def test_past_event_registration_is_rejected(
    client: TestClient, member_headers, location_id
) -> None:
    event_id = insert_event(location_id=location_id, start_date=future_start(days=-2))

    response = client.post(f"/api/events/{event_id}/register", headers=member_headers)

    assert response.status_code == 400


def test_registration_status_for_anonymous_visitor(
    client: TestClient, admin_headers, location_id
) -> None:
    event = _create_event(client, admin_headers, location_id)

    response = client.get(f"/api/events/{event['id']}/register")

    assert response.status_code == 200
    assert response.json()["requires_auth"] is True
    assert response.json()["is_registered"] is False


def test_register_requires_authentication(
    client: TestClient, admin_headers, location_id
) -> None:
    event = _create_event(client, admin_headers, location_id)

    assert client.post(f"/api/events/{event['id']}/register").status_code == 401


def test_unregister(client: TestClient, admin_headers, member_headers, location_id) -> None:
    event = _create_event(client, admin_headers, location_id)

    missing = client.delete(f"/api/events/{event['id']}/register", headers=member_headers)
    assert missing.status_code == 404

    client.post(f"/api/events/{event['id']}/register", headers=member_headers)
    response = client.delete(f"/api/events/{event['id']}/register", headers=member_headers)

    assert response.status_code == 200
    status_response = client.get(
        f"/api/events/{event['id']}/register", headers=member_headers
    )
    assert status_response.json()["is_registered"] is False
    titles = [item["title"] for item in client.get("/api/notifications", headers=member_headers).json()]
    assert "Désinscription confirmée" in titles


def test_participants_listing_is_paginated_and_searchable(
    client: TestClient, admin_headers, location_id
) -> None:
    event = _create_event(client, admin_headers, location_id)
    for name in ("alice", "bruno", "chloe"):
        user = create_user(username=name, email=f"{name}@pulse.fr")
        client.post(f"/api/events/{event['id']}/register", headers=auth_headers(user))

    page = client.get(
        f"/api/events/{event['id']}/participants",
        params={"limit": 2},
        headers=admin_headers,
    ).json()
    assert page["event"]["total_participants"] == 3
    assert len(page["participants"]) == 2
    assert page["pagination"]["has_next_page"] is True

    search = client.get(
        f"/api/events/{event['id']}/participants",
        params={"search": "bru"},
        headers=admin_headers,
    ).json()
    assert [item["user"]["username"] for item in search["participants"]] == ["bruno"]
    assert search["event"]["total_participants"] == 3


def test_participants_listing_requires_admin(
    client: TestClient, admin_headers, member_headers, location_id
) -> None:
    event = _create_event(client, admin_headers, location_id)

    response = client.get(
        f"/api/events/{event['id']}/participants", headers=member_headers
    )

    assert response.status_code == 403
