"""Text rendered for each kind of notification."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from lms.application.use_cases.notifications import events
from lms.domain.entities import Announcement, Assignment, Course

COURSE = Course(
    id=7,
    code="HIS201",
    name="World History",
    department="Humanities",
    campus="North",
    instructor_id=3,
)
ASSIGNMENT = Assignment(
    id=99,
    course_id=7,
    title="Midterm",
    description=None,
    due_date=datetime(2025, 6, 1, 23, 59),
    points=100,
)


def test_assignment_message_includes_course_and_due_date():
    event = events.assignment_created(ASSIGNMENT, COURSE)

    assert event.title == "New Assignment Posted"
    assert event.message == (
        'A new assignment "Midterm" has been posted in World History. Due: Jun 1, 2025.'
    )
    assert event.related_id == 99


@pytest.mark.parametrize(
    ("grade", "points", "expected"),
    [(85, 100, "85.0"), (Decimal("17"), 20, "85.0"), (2, 3, "66.7"), (0, 50, "0.0")],
)
def test_grade_percentage_has_one_decimal(grade, points, expected):
    assert f"{events.grade_percentage(grade, points):.1f}" == expected


def test_grade_message_reports_percentage():
    event = events.submission_graded(
        ASSIGNMENT, COURSE, grade=Decimal("85"), grader_name="Dr. Grey"
    )

    assert event.type == "grade"
    assert "You received 85.0%." in event.message
    assert event.actor_name == "Dr. Grey"


def test_announcement_update_uses_its_own_wording():
    announcement = Announcement(
        id=4,
        author_id=3,
        title="Exam room",
        content="Room 12",
        target="students",
        campus="North",
    )

    created = events.announcement_published(announcement, author_name="Dr. Grey")
    updated = events.announcement_published(
        announcement, author_name="Dr. Grey", is_update=True
    )

    assert created.message == 'Dr. Grey posted a new announcement: "Exam room"'
    assert updated.title == "Announcement Update"
    assert updated.message == 'Dr. Grey updated an announcement: "Exam room"'


def test_rejected_course_request_carries_the_notes():
    rejected = Course(
        id=8,
        code="AST100",
        name="Astrology",
        department="Science",
        campus="North",
        instructor_id=3,
        request_status="rejected",
        request_notes="Not an accredited subject.",
    )

    event = events.course_request_decided(rejected, admin_name="Ada Admin")

    assert event.title == "Course Request Rejected"
    assert event.message.endswith("Notes: Not an accredited subject.")


def test_message_event_points_at_the_conversation():
    event = events.message_sent(conversation_id=12, sender_name="Tony")

    assert event.related_id == 12
    assert event.message == "You have received a new message from Tony."
