"""Tests for registration, token issuance and user administration."""

from __future__ import annotations

from fastapi.testclient import TestClient

from conftest import DEFAULT_PASSWORD, auth_headers, create_user


def _login(client: TestClient, email: str, password: str = DEFAULT_PASSWORD):
    return client.post(
        "/api/auth/token", data={"username": email, "password": password}
    )


def test_register_then_login_returns_token_with_role(client: TestClient) -> None:
    response = client.post(
        "/api/auth/register",
        json={"username": "Bob", "email": "Bob@Pulse.fr", "password": "azerty1"},
    )

    assert response.status_code == 201
    user = response.json()["user"]
    assert user["username"] == "bob"
    assert user["email"] == "bob@pulse.fr"
    assert user["role"] == "USER"

    token_response = _login(client, "bob@pulse.fr", "azerty1")
    assert token_response.status_code == 200
    body = token_response.json()
    assert body["token_type"] == "bearer"
    assert body["role"] == "USER"

    me = client.get(
        "/api/users/me", headers={"Authorization": f"Bearer {body['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["email"] == "bob@pulse.fr"


def test_register_rejects_duplicates_case_insensitively(client: TestClient) -> None:
    create_user(username="bob", email="bob@pulse.fr")

    response = client.post(
        "/api/auth/register",
        json={"username": "BOB", "email": "other@pulse.fr", "password": "azerty1"},
    )

    assert response.status_code == 409


def test_register_rejects_short_password(client: TestClient) -> None:
    response = client.post(
        "/api/auth/register",
        json={"username": "bob", "email": "bob@pulse.fr", "password": "abc"},
    )

    assert response.status_code == 400


def test_login_with_wrong_password_is_rejected(client: TestClient, member) -> None:
    response = _login(client, member.email, "wrong-password")

    assert response.status_code == 401
    assert response.json()["detail"] == "Email ou mot de passe incorrect"


def test_protected_route_requires_token(client: TestClient) -> None:
    assert client.get("/api/users/me").status_code == 401
    response = client.get(
        "/api/users/me", headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401


def test_user_administration_requires_admin(
    client: TestClient, member_headers
) -> None:
    response = client.get("/api/users", headers=member_headers)

    assert response.status_code == 403
    assert response.json()["detail"] == "Accès non autorisé"


def test_admin_updates_user_and_password_change_revokes_tokens(
    client: TestClient, admin_headers, member
) -> None:
    old_headers = auth_headers(member)

    response = client.patch(
        f"/api/users/{member.id}",
        json={"username": "alice2", "password": "NewSecret1"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["username"] == "alice2"
    assert client.get("/api/users/me", headers=old_headers).status_code == 401
    assert _login(client, member.email, "NewSecret1").status_code == 200


def test_update_user_rejects_taken_email(client: TestClient, admin_headers, admin, member) -> None:
    response = client.patch(
        f"/api/users/{member.id}", json={"email": admin.email}, headers=admin_headers
    )

    assert response.status_code == 409


def test_admin_cannot_delete_own_account(client: TestClient, admin, admin_headers) -> None:
    response = client.delete(f"/api/users/{admin.id}", headers=admin_headers)

    assert response.status_code == 400


def test_delete_user_then_lookup_returns_404(
    client: TestClient, admin_headers, member
) -> None:
    response = client.delete(f"/api/users/{member.id}", headers=admin_headers)

    assert response.status_code == 200
    assert client.get(f"/api/users/{member.id}", headers=admin_headers).status_code == 404


def test_non_numeric_user_id_is_a_bad_request(client: TestClient, admin_headers) -> None:
    response = client.get("/api/users/abc", headers=admin_headers)

    assert response.status_code == 400


def test_user_events_are_private(client: TestClient, member, admin) -> None:
    other = create_user(username="mallory", email="mallory@pulse.fr")

    forbidden = client.get(f"/api/users/{member.id}/events", headers=auth_headers(other))
    own = client.get(f"/api/users/{member.id}/events", headers=auth_headers(member))
    as_admin = client.get(f"/api/users/{member.id}/events", headers=auth_headers(admin))

    assert forbidden.status_code == 403
    assert own.status_code == 200
    assert own.json() == []
    assert as_admin.status_code == 200
