"""Tests for event management and reminder scheduling."""

from __future__ import annotations

from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from conftest import event_payload, future_start, insert_event


def _scheduled(client: TestClient, headers) -> list[dict]:
    response = client.get("/api/scheduled-notifications", headers=headers)
    assert response.status_code == 200
    return response.json()["notifications"]


def test_create_event_schedules_two_reminders(
    client: TestClient, admin_headers, location_id
) -> None:
    start = future_start()

    response = client.post(
        "/api/events",
        json=event_payload(location_id, start_date=start.isoformat()),
        headers=admin_headers,
    )

    assert response.status_code == 201
    event = response.json()
    assert event["location"]["name"] == "Zénith de Paris"

    reminders = _scheduled(client, admin_headers)
    assert sorted(item["type"] for item in reminders) == [
        "ONE_HOUR_BEFORE",
        "TEN_MINUTES_BEFORE",
    ]
    offsets = {
        item["type"]: start - datetime.fromisoformat(item["scheduled_for"])
        for item in reminders
    }
    assert offsets["ONE_HOUR_BEFORE"] == timedelta(minutes=60)
    assert offsets["TEN_MINUTES_BEFORE"] == timedelta(minutes=10)
    assert all(item["is_sent"] is False for item in reminders)
    assert reminders[0]["message"] == "Artiste joue dans 1h, Zénith de Paris"


def test_create_event_requires_admin(client: TestClient, member_headers, location_id) -> None:
    response = client.post(
        "/api/events", json=event_payload(location_id), headers=member_headers
    )

    assert response.status_code == 403


def test_create_event_rejects_past_date(client: TestClient, admin_headers, location_id) -> None:
    yesterday = future_start(days=-1)

    response = client.post(
        "/api/events",
        json=event_payload(location_id, start_date=yesterday.isoformat()),
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert _scheduled(client, admin_headers) == []


def test_create_event_validates_fields(client: TestClient, admin_headers, location_id) -> None:
    short_title = client.post(
        "/api/events", json=event_payload(location_id, title="Ra"), headers=admin_headers
    )
    bad_genre = client.post(
        "/api/events", json=event_payload(location_id, genre="JAZZ"), headers=admin_headers
    )
    unknown_location = client.post(
        "/api/events", json=event_payload(9999), headers=admin_headers
    )

    assert short_title.status_code == 400
    assert bad_genre.status_code == 400
    assert unknown_location.status_code == 400


def test_artist_cannot_play_twice_the_same_day(
    client: TestClient, admin_headers, location_id
) -> None:
    artist = client.post("/api/artists", json={"name": "Damso"}, headers=admin_headers).json()
    start = future_start().replace(hour=20, minute=0)
    first = client.post(
        "/api/events",
        json=event_payload(location_id, artist_id=artist["id"], start_date=start.isoformat()),
        headers=admin_headers,
    )
    assert first.status_code == 201

    clash = client.post(
        "/api/events",
        json=event_payload(
            location_id,
            title="After party",
            artist_id=artist["id"],
            start_date=start.replace(hour=23).isoformat(),
        ),
        headers=admin_headers,
    )

    assert clash.status_code == 400
    assert "Damso" in clash.json()["detail"]
    assert "Nuit du Rap" in clash.json()["detail"]


def test_update_event_reschedules_pending_reminders(
    client: TestClient, admin_headers, location_id
) -> None:
    event = client.post(
        "/api/events", json=event_payload(location_id), headers=admin_headers
    ).json()
    new_start = future_start(days=14)

    response = client.put(
        f"/api/events/{event['id']}",
        json={"start_date": new_start.isoformat()},
        headers=admin_headers,
    )

    assert response.status_code == 200
    for item in _scheduled(client, admin_headers):
        scheduled_for = datetime.fromisoformat(item["scheduled_for"])
        assert new_start - scheduled_for in (timedelta(minutes=60), timedelta(minutes=10))


def test_past_event_stays_editable_without_moving_its_date(
    client: TestClient, admin_headers, location_id
) -> None:
    event_id = insert_event(location_id=location_id, start_date=future_start(days=-3))

    response = client.put(
        f"/api/events/{event_id}",
        json={"title": "Concert passé (replay)"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["title"] == "Concert passé (replay)"


def test_list_events_filters_and_paginates(
    client: TestClient, admin_headers, location_id
) -> None:
    for days, genre in ((3, "RAP"), (4, "ROCK"), (5, "RAP")):
        client.post(
            "/api/events",
            json=event_payload(
                location_id,
                genre=genre,
                start_date=future_start(days=days).isoformat(),
            ),
            headers=admin_headers,
        )

    rap = client.get("/api/events", params={"genre": "RAP", "limit": 1}).json()

    assert len(rap["events"]) == 1
    assert rap["pagination"] == {
        "page": 1,
        "limit": 1,
        "total": 2,
        "total_pages": 2,
        "has_next_page": True,
        "has_previous_page": False,
    }
    by_location = client.get("/api/events", params={"search": "Zénith"}).json()
    assert by_location["pagination"]["total"] == 3


def test_delete_event_removes_its_reminders(
    client: TestClient, admin_headers, location_id
) -> None:
    event = client.post(
        "/api/events", json=event_payload(location_id), headers=admin_headers
    ).json()

    response = client.delete(f"/api/events/{event['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert client.get(f"/api/events/{event['id']}").status_code == 404
    assert _scheduled(client, admin_headers) == []


def test_non_numeric_event_id_is_a_bad_request(client: TestClient) -> None:
    assert client.get("/api/events/NaN").status_code == 400
    assert client.get("/api/events/12345").status_code == 404
