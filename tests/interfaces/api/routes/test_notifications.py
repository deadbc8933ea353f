"""Tests for the notification inbox and scheduled reminders."""

from __future__ import annotations

from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from conftest import auth_headers, create_user, event_payload, future_start


def test_admin_sends_notification_to_one_user(
    client: TestClient, admin_headers, member, member_headers
) -> None:
    response = client.post(
        "/api/notifications",
        json={"title": "Bienvenue", "message": "Merci de votre inscription", "user_id": member.id},
        headers=admin_headers,
    )

    assert response.status_code == 201
    inbox = client.get("/api/notifications", headers=member_headers).json()
    assert [item["title"] for item in inbox] == ["Bienvenue"]
    assert inbox[0]["is_read"] is False


def test_admin_broadcasts_to_every_user(client: TestClient, admin_headers, member) -> None:
    create_user(username="bruno", email="bruno@pulse.fr")

    response = client.post(
        "/api/notifications",
        json={"title": "Maintenance", "message": "Coupure ce soir", "send_to_all": True},
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert len(response.json()) == 3


def test_notification_requires_a_recipient(client: TestClient, admin_headers) -> None:
    response = client.post(
        "/api/notifications",
        json={"title": "Bienvenue", "message": "Message"},
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_owner_marks_and_deletes_notification(
    client: TestClient, admin_headers, member, member_headers
) -> None:
    created = client.post(
        "/api/notifications",
        json={"title": "Info", "message": "Nouveau concert", "user_id": member.id},
        headers=admin_headers,
    ).json()[0]
    intruder = auth_headers(create_user(username="mallory", email="mallory@pulse.fr"))

    assert (
        client.put(
            f"/api/notifications/{created['id']}", json={"read": True}, headers=intruder
        ).status_code
        == 403
    )

    read = client.put(
        f"/api/notifications/{created['id']}", json={"read": True}, headers=member_headers
    )
    assert read.status_code == 200
    assert read.json()["is_read"] is True
    assert read.json()["read_at"] is not None

    deleted = client.delete(f"/api/notifications/{created['id']}", headers=member_headers)
    assert deleted.status_code == 200
    assert client.get("/api/notifications", headers=member_headers).json() == []


def test_manual_scheduled_notification(
    client: TestClient, admin_headers, location_id
) -> None:
    event = client.post(
        "/api/events", json=event_payload(location_id), headers=admin_headers
    ).json()
    scheduled_for = future_start(days=1)

    response = client.post(
        "/api/scheduled-notifications",
        json={
            "event_id": event["id"],
            "type": "TEN_MINUTES_BEFORE",
            "scheduled_for": scheduled_for.isoformat(),
        },
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["title"] == "Rappel événement"
    assert datetime.fromisoformat(response.json()["scheduled_for"]) == scheduled_for

    filtered = client.get(
        "/api/scheduled-notifications",
        params={"type": "TEN_MINUTES_BEFORE"},
        headers=admin_headers,
    ).json()
    assert filtered["pagination"]["total"] == 2


def test_manual_scheduled_notification_rejects_unknown_type(
    client: TestClient, admin_headers, location_id
) -> None:
    event = client.post(
        "/api/events", json=event_payload(location_id), headers=admin_headers
    ).json()

    response = client.post(
        "/api/scheduled-notifications",
        json={
            "event_id": event["id"],
            "type": "ONE_DAY_BEFORE",
            "scheduled_for": (future_start() - timedelta(days=1)).isoformat(),
        },
        headers=admin_headers,
    )

    assert response.status_code == 400
