"""Domain actions that fan out notifications through the API."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from lms.application.use_cases.notifications import FanOutPolicy
from lms.application.use_cases.notifications import writer as writer_module
from lms.infrastructure.repositories import AttendanceRepository, UserRepository


@pytest.fixture()
def teacher(make_user):
    return make_user("teacher", "Dr. Grey", campus="North")


@pytest.fixture()
def course(make_course, teacher):
    return make_course(teacher, code="HIS201", name="World History")


def _notifications(client, headers, type_: str | None = None) -> list[dict]:
    items = client.get("/notifications", params={"limit": 100}, headers=headers).json()
    return [item for item in items if type_ is None or item["type"] == type_]


def _count(client, headers) -> int:
    return client.get("/notifications/count", headers=headers).json()["count"]


def _post_assignment(client, course, teacher, auth_headers, title: str = "Midterm"):
    response = client.post(
        f"/courses/{course.id}/assignments",
        json={"title": title, "due_date": "2025-06-01T00:00:00", "points": 100},
        headers=auth_headers(teacher),
    )
    assert response.status_code == 201
    return response.json()


def test_new_assignment_notifies_every_enrolled_student(
    client, make_user, enroll, course, teacher, auth_headers
):
    students = [make_user("student", campus="North") for _ in range(3)]
    for student in students:
        enroll(student, course)
    before = [_count(client, auth_headers(student)) for student in students]

    assignment = _post_assignment(client, course, teacher, auth_headers)

    for student, previous in zip(students, before):
        headers = auth_headers(student)
        (notification,) = _notifications(client, headers, "assignment")
        assert notification["related_id"] == assignment["id"]
        assert notification["is_read"] is False
        assert "New Assignment Posted" in notification["title"]
        assert notification["message"].endswith("Due: Jun 1, 2025.")
        assert _count(client, headers) == previous + 1


def test_assignment_from_a_non_instructor_is_forbidden(
    client, make_user, course, auth_headers
):
    intruder = make_user("teacher")

    response = client.post(
        f"/courses/{course.id}/assignments",
        json={"title": "Quiz", "due_date": "2025-06-01T00:00:00", "points": 10},
        headers=auth_headers(intruder),
    )

    assert response.status_code == 403


def test_submission_and_grade_notify_both_sides(
    client, make_user, enroll, course, teacher, auth_headers
):
    student = make_user("student", "Sam Student", campus="North")
    enroll(student, course)
    assignment = _post_assignment(client, course, teacher, auth_headers)

    submitted = client.post(
        f"/assignments/{assignment['id']}/submissions",
        json={"submission_text": "My answers"},
        headers=auth_headers(student),
    )
    assert submitted.status_code == 201
    (received,) = _notifications(client, auth_headers(teacher), "submission")
    assert received["title"] == "New Submission from Sam Student"

    graded = client.put(
        f"/submissions/{submitted.json()['id']}/grade",
        json={"grade": 85, "feedback": "Good work"},
        headers=auth_headers(teacher),
    )
    assert graded.status_code == 200
    (grade,) = _notifications(client, auth_headers(student), "grade")
    assert "85.0%" in grade["message"]
    assert grade["related_id"] == assignment["id"]


def test_grade_above_points_is_rejected(client, make_user, enroll, course, teacher, auth_headers):
    student = make_user("student", campus="North")
    enroll(student, course)
    assignment = _post_assignment(client, course, teacher, auth_headers)
    submission = client.post(
        f"/assignments/{assignment['id']}/submissions",
        json={},
        headers=auth_headers(student),
    ).json()

    response = client.put(
        f"/submissions/{submission['id']}/grade",
        json={"grade": 101},
        headers=auth_headers(teacher),
    )

    assert response.status_code == 400
    assert _notifications(client, auth_headers(student), "grade") == []


def test_failed_notification_does_not_fail_the_grade(
    client, make_user, enroll, course, teacher, auth_headers, monkeypatch
):
    student = make_user("student", campus="North")
    enroll(student, course)
    assignment = _post_assignment(client, course, teacher, auth_headers)
    submission = client.post(
        f"/assignments/{assignment['id']}/submissions",
        json={"submission_text": "Answer"},
        headers=auth_headers(student),
    ).json()

    def broken_create(self, notification):
        raise RuntimeError("notifications table unavailable")

    monkeypatch.setattr(writer_module.NotificationRepository, "create", broken_create)
    response = client.put(
        f"/submissions/{submission['id']}/grade",
        json={"grade": 70},
        headers=auth_headers(teacher),
    )
    monkeypatch.undo()

    assert response.status_code == 200
    assert response.json()["status"] == "graded"
    assert _notifications(client, auth_headers(student), "grade") == []


def test_failed_recipient_lookup_does_not_fail_the_grade(
    client, make_user, enroll, course, teacher, auth_headers, monkeypatch
):
    student = make_user("student", campus="North")
    enroll(student, course)
    assignment = _post_assignment(client, course, teacher, auth_headers)
    submission = client.post(
        f"/assignments/{assignment['id']}/submissions",
        json={"submission_text": "Answer"},
        headers=auth_headers(student),
    ).json()

    def broken_lookup(self, submission):
        raise OperationalError("SELECT users", {}, Exception("database is locked"))

    monkeypatch.setattr(FanOutPolicy, "submission_graded", broken_lookup)
    response = client.put(
        f"/submissions/{submission['id']}/grade",
        json={"grade": 85},
        headers=auth_headers(teacher),
    )
    monkeypatch.undo()

    assert response.status_code == 200
    assert response.json()["status"] == "graded"
    assert _notifications(client, auth_headers(student), "grade") == []


def test_cleared_admin_receives_exactly_the_new_course_request(
    client, admin, teacher, auth_headers
):
    admin_headers = auth_headers(admin)
    client.post(
        "/courses/requests",
        json={"code": "ART100", "name": "Drawing", "department": "Arts"},
        headers=auth_headers(teacher),
    )

    assert client.delete("/notifications", headers=admin_headers).status_code == 200
    assert _notifications(client, admin_headers) == []

    response = client.post(
        "/courses/requests",
        json={"code": "MUS100", "name": "Music Theory", "department": "Arts"},
        headers=auth_headers(teacher),
    )
    assert response.status_code == 201

    (notification,) = _notifications(client, admin_headers)
    assert notification["type"] == "course"
    assert notification["title"] == "New Course Request"
    assert notification["related_id"] == response.json()["id"]
    assert notification["message"] == (
        'Dr. Grey has requested a new course "MUS100: Music Theory". Please review.'
    )


def test_approval_notifies_requester_and_campus_students(
    client, admin, make_user, teacher, auth_headers
):
    north_student = make_user("student", campus="North")
    south_student = make_user("student", campus="South")
    request = client.post(
        "/courses/requests",
        json={"code": "BIO110", "name": "Biology", "department": "Science"},
        headers=auth_headers(teacher),
    ).json()
    assert request["request_status"] == "pending"

    response = client.patch(
        f"/courses/{request['id']}/request-status",
        json={"status": "approved", "notes": "Welcome aboard"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 200
    assert response.json()["status"] == "active"
    (decision,) = _notifications(client, auth_headers(teacher), "course")
    assert decision["title"] == "Course Request Approved"
    (available,) = _notifications(client, auth_headers(north_student), "course")
    assert available["title"] == "New Course Available"
    assert _notifications(client, auth_headers(south_student), "course") == []

    again = client.patch(
        f"/courses/{request['id']}/request-status",
        json={"status": "rejected"},
        headers=auth_headers(admin),
    )
    assert again.status_code == 400


def test_enrollment_notifies_the_instructor(client, make_user, course, teacher, auth_headers):
    student = make_user("student", "Sam Student", campus="North")

    response = client.post(f"/courses/{course.id}/enrollments", headers=auth_headers(student))

    assert response.status_code == 201
    (notification,) = _notifications(client, auth_headers(teacher), "course")
    assert notification["title"] == "New Course Enrollment"
    duplicate = client.post(f"/courses/{course.id}/enrollments", headers=auth_headers(student))
    assert duplicate.status_code == 400


def test_announcement_reaches_its_audience_but_not_its_author(
    client, make_user, teacher, auth_headers
):
    student = make_user("student", campus="North")
    colleague = make_user("teacher", campus="North")

    created = client.post(
        "/announcements",
        json={"title": "Field trip", "content": "Bring boots.", "target": "students"},
        headers=auth_headers(teacher),
    )
    assert created.status_code == 201
    updated = client.put(
        f"/announcements/{created.json()['id']}",
        json={"title": "Field trip moved", "content": "Now on Monday.", "target": "students"},
        headers=auth_headers(teacher),
    )
    assert updated.status_code == 200

    titles = [n["title"] for n in _notifications(client, auth_headers(student), "announcement")]
    assert titles == ["Announcement Update", "New Announcement"]
    assert _notifications(client, auth_headers(teacher)) == []
    assert _notifications(client, auth_headers(colleague)) == []


def test_students_cannot_publish_announcements(client, make_user, auth_headers):
    student = make_user("student")

    response = client.post(
        "/announcements",
        json={"title": "Party", "content": "Tonight"},
        headers=auth_headers(student),
    )

    assert response.status_code == 403


def test_message_notifies_other_participants(client, make_user, auth_headers):
    sender = make_user("student", "Tony")
    recipient = make_user("teacher")

    conversation = client.post(
        "/conversations",
        json={"participant_ids": [recipient.id]},
        headers=auth_headers(sender),
    ).json()
    response = client.post(
        f"/conversations/{conversation['id']}/messages",
        json={"content": "Hello there"},
        headers=auth_headers(sender),
    )

    assert response.status_code == 201
    (notification,) = _notifications(client, auth_headers(recipient), "message")
    assert notification["related_id"] == conversation["id"]
    assert notification["message"] == "You have received a new message from Tony."
    assert _notifications(client, auth_headers(sender)) == []


def test_outsiders_cannot_post_to_a_conversation(client, make_user, auth_headers):
    first, second, outsider = make_user("student"), make_user("student"), make_user("student")
    conversation = client.post(
        "/conversations",
        json={"participant_ids": [second.id]},
        headers=auth_headers(first),
    ).json()

    response = client.post(
        f"/conversations/{conversation['id']}/messages",
        json={"content": "Let me in"},
        headers=auth_headers(outsider),
    )

    assert response.status_code == 403


def test_muted_assignment_preference_skips_the_student(
    client, make_user, enroll, course, teacher, auth_headers
):
    student = make_user("student", campus="North")
    enroll(student, course)
    headers = auth_headers(student)

    settings = client.put(
        "/users/me/settings", json={"assignment_notifications": False}, headers=headers
    )
    assert settings.status_code == 200
    assert settings.json() == {
        "assignment_notifications": False,
        "message_notifications": True,
        "announcement_notifications": True,
    }

    _post_assignment(client, course, teacher, auth_headers)

    assert _notifications(client, headers) == []


def test_new_account_receives_a_welcome_notification(client, admin, session, auth_headers):
    response = client.post(
        "/users",
        json={
            "name": "Nina New",
            "email": "nina@example.com",
            "password": "LongEnough1",
            "role": "student",
            "campus": "North",
        },
        headers=auth_headers(admin),
    )
    assert response.status_code == 201

    created = UserRepository(session).get_by_email("nina@example.com")
    (welcome,) = _notifications(client, auth_headers(created))
    assert welcome["type"] == "system"
    assert welcome["related_id"] is None


def test_attendance_is_all_or_nothing(client, make_user, enroll, course, teacher, auth_headers):
    enrolled = make_user("student", campus="North")
    stranger = make_user("student", campus="North")
    enroll(enrolled, course)
    url = f"/courses/{course.id}/attendance"

    failed = client.post(
        url,
        json={
            "date": "2025-02-10",
            "records": [
                {"student_id": enrolled.id, "status": "present"},
                {"student_id": stranger.id, "status": "present"},
            ],
        },
        headers=auth_headers(teacher),
    )
    assert failed.status_code == 400

    saved = client.post(
        url,
        json={"date": "2025-02-10", "records": [{"student_id": enrolled.id, "status": "late"}]},
        headers=auth_headers(teacher),
    )
    assert saved.status_code == 201
    assert [(r["student_id"], r["status"]) for r in saved.json()] == [(enrolled.id, "late")]


def test_attendance_database_error_is_a_server_error(
    client, make_user, enroll, course, teacher, auth_headers, monkeypatch
):
    student = make_user("student", campus="North")
    enroll(student, course)

    def unavailable(self, record):
        raise OperationalError("INSERT INTO attendance", {}, Exception("disk I/O error"))

    monkeypatch.setattr(AttendanceRepository, "upsert", unavailable)
    response = client.post(
        f"/courses/{course.id}/attendance",
        json={"date": "2025-02-10", "records": [{"student_id": student.id, "status": "present"}]},
        headers=auth_headers(teacher),
    )

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
