"""Tests for artists, locations and stands."""

from __future__ import annotations

from datetime import timedelta

from fastapi.testclient import TestClient

from conftest import event_payload, future_start


def test_artist_crud(client: TestClient, admin_headers, member_headers) -> None:
    forbidden = client.post("/api/artists", json={"name": "Orelsan"}, headers=member_headers)
    assert forbidden.status_code == 403

    created = client.post(
        "/api/artists",
        json={"name": "  Orelsan ", "description": "Rappeur caennais"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    artist = created.json()
    assert artist["name"] == "Orelsan"
    assert artist["events"] == []

    updated = client.put(
        f"/api/artists/{artist['id']}",
        json={"image_path": "/assets/artists/orelsan.png"},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["description"] == "Rappeur caennais"
    assert updated.json()["image_path"] == "/assets/artists/orelsan.png"

    deleted = client.delete(f"/api/artists/{artist['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    assert client.get(f"/api/artists/{artist['id']}").status_code == 404


def test_artists_are_listed_newest_first_with_their_events(
    client: TestClient, admin_headers, location_id
) -> None:
    first = client.post("/api/artists", json={"name": "Damso"}, headers=admin_headers).json()
    second = client.post("/api/artists", json={"name": "Angèle"}, headers=admin_headers).json()
    client.post(
        "/api/events",
        json=event_payload(location_id, artist_id=first["id"]),
        headers=admin_headers,
    )

    artists = client.get("/api/artists").json()

    assert [item["id"] for item in artists] == [second["id"], first["id"]]
    assert len(artists[1]["events"]) == 1


def test_deleting_an_artist_keeps_its_events(
    client: TestClient, admin_headers, location_id
) -> None:
    artist = client.post("/api/artists", json={"name": "Damso"}, headers=admin_headers).json()
    event = client.post(
        "/api/events",
        json=event_payload(location_id, artist_id=artist["id"]),
        headers=admin_headers,
    ).json()

    client.delete(f"/api/artists/{artist['id']}", headers=admin_headers)

    response = client.get(f"/api/events/{event['id']}")
    assert response.status_code == 200
    assert response.json()["artist_id"] is None


def test_location_crud_and_search(client: TestClient, admin_headers) -> None:
    created = client.post(
        "/api/locations",
        json={"name": "Bercy", "address": "8 Boulevard de Bercy"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    assert created.json()["has_coordinates"] is False
    client.post(
        "/api/locations",
        json={"name": "Olympia", "latitude": 48.87, "longitude": 2.328},
        headers=admin_headers,
    )

    listing = client.get("/api/locations", params={"search": "bercy"}).json()
    assert [item["name"] for item in listing["locations"]] == ["Bercy"]
    assert listing["pagination"]["total"] == 1

    mapped = client.get("/api/locations", params={"has_coordinates": True}).json()
    assert [item["name"] for item in mapped["locations"]] == ["Olympia"]

    location_id = created.json()["id"]
    updated = client.put(
        f"/api/locations/{location_id}",
        json={"latitude": 48.8386, "longitude": 2.3785},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["has_coordinates"] is True


def test_location_rejects_out_of_range_coordinates(client: TestClient, admin_headers) -> None:
    response = client.post(
        "/api/locations",
        json={"name": "Nulle part", "latitude": 120},
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_referenced_location_cannot_be_deleted(
    client: TestClient, admin_headers, location_id
) -> None:
    client.post("/api/events", json=event_payload(location_id), headers=admin_headers)

    response = client.delete(f"/api/locations/{location_id}", headers=admin_headers)

    assert response.status_code == 409
    detail = client.get(f"/api/locations/{location_id}").json()
    assert len(detail["events"]) == 1


def test_stand_lifecycle_flattens_its_location(
    client: TestClient, admin_headers, location_id
) -> None:
    opened_at = future_start()
    payload = {
        "name": "Food truck",
        "description": "Burgers et frites",
        "type": "FOOD",
        "location_id": location_id,
        "opened_at": opened_at.isoformat(),
        "closed_at": (opened_at + timedelta(hours=6)).isoformat(),
    }

    created = client.post("/api/stands", json=payload, headers=admin_headers)
    assert created.status_code == 201
    stand = created.json()
    assert stand["location_name"] == "Zénith de Paris"
    assert stand["latitude"] == 48.8942

    invalid = client.put(
        f"/api/stands/{stand['id']}",
        json={"closed_at": (opened_at - timedelta(hours=1)).isoformat()},
        headers=admin_headers,
    )
    assert invalid.status_code == 400

    assert len(client.get("/api/stands").json()) == 1
    assert client.delete(f"/api/stands/{stand['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/stands/{stand['id']}").status_code == 404


def test_stand_requires_known_type(client: TestClient, admin_headers, location_id) -> None:
    opened_at = future_start()
    response = client.post(
        "/api/stands",
        json={
            "name": "Stand",
            "description": "Description",
            "type": "CASINO",
            "location_id": location_id,
            "opened_at": opened_at.isoformat(),
            "closed_at": (opened_at + timedelta(hours=1)).isoformat(),
        },
        headers=admin_headers,
    )

    assert response.status_code == 400
