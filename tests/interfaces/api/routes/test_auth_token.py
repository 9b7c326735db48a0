"""Tests for the authentication token endpoint."""

from __future__ import annotations


def _login(client, email: str, password: str):
    return client.post(
        "/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )


def test_login_returns_bearer_token_usable_on_protected_routes(client, make_user, user_password):
    student = make_user("student", "Sam Student")

    response = _login(client, student.email, user_password)

    assert response.status_code == 200
    payload = response.json()
    assert payload["token_type"] == "bearer"
    assert payload["role"] == "student"

    me = client.get("/users/me", headers={"Authorization": f"Bearer {payload['access_token']}"})
    assert me.status_code == 200
    assert me.json()["name"] == "Sam Student"
    assert me.json()["last_login"] is not None


def test_wrong_password_is_rejected(client, make_user):
    student = make_user("student")

    assert _login(client, student.email, "not-the-password").status_code == 401


def test_inactive_user_cannot_log_in(client, make_user, user_password):
    student = make_user("student", is_active=False)

    assert _login(client, student.email, user_password).status_code == 403


def test_notifications_require_authentication(client):
    assert client.get("/notifications").status_code == 401
    assert client.get("/notifications", headers={"Authorization": "Bearer nope"}).status_code == 401
