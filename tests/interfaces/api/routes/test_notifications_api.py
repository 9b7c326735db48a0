"""HTTP surface of the notification inbox."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from lms.application.use_cases.notifications import NotificationEvent, NotificationWriter
from lms.infrastructure.repositories import NotificationRepository


@pytest.fixture()
def student(make_user):
    return make_user("student", "Sam Student")


@pytest.fixture()
def seeded(session, student, make_user):
    """Three notifications for ``student`` and one for somebody else."""

    other = make_user("student", "Olive Other")
    writer = NotificationWriter(session)
    for index in range(3):
        event = NotificationEvent(type="system", title=f"Notice {index}", message="Body")
        writer.notify(event, [student.id])
    writer.notify(NotificationEvent(type="system", title="Theirs", message="Body"), [other.id])
    return other


def test_list_returns_the_documented_shape(client, student, seeded, auth_headers):
    response = client.get("/notifications", headers=auth_headers(student))

    assert response.status_code == 200
    body = response.json()
    assert [item["title"] for item in body] == ["Notice 2", "Notice 1", "Notice 0"]
    assert set(body[0]) == {
        "id",
        "user_id",
        "title",
        "message",
        "type",
        "related_id",
        "is_read",
        "created_at",
        "actor_name",
        "subject_title",
    }
    assert all(item["user_id"] == student.id for item in body)


def test_limit_is_validated(client, student, auth_headers):
    headers = auth_headers(student)

    assert client.get("/notifications", params={"limit": 0}, headers=headers).status_code == 422
    assert client.get("/notifications", params={"limit": 101}, headers=headers).status_code == 422


def test_count_mark_one_and_mark_all(client, student, seeded, auth_headers):
    headers = auth_headers(student)
    newest = client.get("/notifications", params={"limit": 1}, headers=headers).json()[0]

    assert client.get("/notifications/count", headers=headers).json() == {"count": 3}

    for _ in range(2):
        response = client.patch(f"/notifications/{newest['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Notification marked as read"}
    assert client.get("/notifications/count", headers=headers).json() == {"count": 2}

    response = client.patch("/notifications", headers=headers)
    assert response.status_code == 200
    assert client.get("/notifications/count", headers=headers).json() == {"count": 0}
    assert all(item["is_read"] for item in client.get("/notifications", headers=headers).json())


def test_foreign_and_missing_notifications_are_indistinguishable(
    client, student, seeded, auth_headers
):
    other = seeded
    theirs = client.get("/notifications", headers=auth_headers(other)).json()[0]

    foreign = client.patch(f"/notifications/{theirs['id']}", headers=auth_headers(student))
    missing = client.patch("/notifications/987654", headers=auth_headers(student))

    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()
    assert client.get("/notifications/count", headers=auth_headers(other)).json() == {"count": 1}


def test_clear_removes_only_the_callers_notifications(client, student, seeded, auth_headers):
    other = seeded

    response = client.delete("/notifications", headers=auth_headers(student))

    assert response.status_code == 200
    assert response.json() == {"message": "All notifications cleared"}
    assert client.get("/notifications", headers=auth_headers(student)).json() == []
    assert len(client.get("/notifications", headers=auth_headers(other)).json()) == 1


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_database_errors_become_a_generic_500(client, student, auth_headers, monkeypatch):
    def unavailable(self, user_id):
        raise OperationalError("SELECT notifications", {}, Exception("connection refused"))

    monkeypatch.setattr(NotificationRepository, "count_unread", unavailable)
    response = client.get("/notifications/count", headers=auth_headers(student))

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
