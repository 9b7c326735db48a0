"""Recipient resolution for every notification-producing event."""

from __future__ import annotations

from lms.application.use_cases.notifications import FanOutPolicy
from lms.domain.entities import ALL_CAMPUSES, Announcement, AssignmentSubmission, UserSettings
from lms.infrastructure.repositories import ConversationRepository, UserSettingsRepository


def _announcement(author, *, target: str, campus: str = ALL_CAMPUSES) -> Announcement:
    return Announcement(
        id=1,
        author_id=author.id,
        title="Campus closed",
        content="No classes on Friday.",
        target=target,
        campus=campus,
    )


def test_assignment_reaches_only_active_enrollments(session, make_user, make_course, enroll):
    teacher = make_user("teacher")
    course = make_course(teacher)
    active = make_user("student")
    dropped = make_user("student")
    make_user("student")
    enroll(active, course)
    enroll(dropped, course, status="dropped")

    assert FanOutPolicy(session).assignment_created(course.id) == [active.id]


def test_assignment_with_no_students_has_no_recipients(session, make_user, make_course):
    course = make_course(make_user("teacher"))

    assert FanOutPolicy(session).assignment_created(course.id) == []


def test_assignment_respects_preferences_and_inactive_users(
    session, make_user, make_course, enroll
):
    course = make_course(make_user("teacher"))
    muted = make_user("student")
    inactive = make_user("student", is_active=False)
    listening = make_user("student")
    for student in (muted, inactive, listening):
        enroll(student, course)
    UserSettingsRepository(session).save(
        UserSettings(user_id=muted.id, assignment_notifications=False)
    )

    assert FanOutPolicy(session).assignment_created(course.id) == [listening.id]


def test_grade_goes_to_the_submitting_student_regardless_of_preferences(session, make_user):
    student = make_user("student")
    UserSettingsRepository(session).save(
        UserSettings(
            user_id=student.id,
            assignment_notifications=False,
            message_notifications=False,
            announcement_notifications=False,
        )
    )
    submission = AssignmentSubmission(id=3, assignment_id=1, student_id=student.id)

    assert FanOutPolicy(session).submission_graded(submission) == [student.id]


def test_submission_reaches_the_instructor_unless_assignments_are_muted(
    session, make_user, make_course
):
    teacher = make_user("teacher")
    course = make_course(teacher)
    policy = FanOutPolicy(session)

    assert policy.submission_received(course) == [teacher.id]

    UserSettingsRepository(session).save(
        UserSettings(user_id=teacher.id, assignment_notifications=False)
    )

    assert policy.submission_received(course) == []


def test_announcement_for_all_targets_students_of_the_campus(session, make_user):
    author = make_user("teacher", campus="North")
    north = make_user("student", campus="North")
    make_user("student", campus="South")
    everywhere = make_user("student", campus=ALL_CAMPUSES)
    make_user("teacher", campus="North")

    recipients = FanOutPolicy(session).announcement_published(
        _announcement(author, target="all", campus="North")
    )

    assert recipients == [north.id, everywhere.id]


def test_announcement_for_teachers_excludes_the_author(session, make_user):
    author = make_user("teacher")
    colleague = make_user("teacher", campus="South")
    make_user("student")

    recipients = FanOutPolicy(session).announcement_published(
        _announcement(author, target="teachers")
    )

    assert recipients == [colleague.id]


def test_announcement_for_admins(session, make_user, admin):
    author = make_user("teacher")
    second_admin = make_user("admin")

    recipients = FanOutPolicy(session).announcement_published(
        _announcement(author, target="admins")
    )

    assert recipients == [admin.id, second_admin.id]


def test_course_request_reaches_every_admin_without_campus_filter(session, make_user, admin):
    other_admin = make_user("admin", campus="South")
    make_user("teacher")

    assert FanOutPolicy(session).course_request_submitted() == [admin.id, other_admin.id]


def test_course_decision_reaches_exactly_the_requester(session, make_user, make_course):
    teacher = make_user("teacher")
    make_user("teacher")
    course = make_course(teacher)

    assert FanOutPolicy(session).course_request_decided(course) == [teacher.id]


def test_message_reaches_participants_except_sender(session, make_user):
    sender = make_user("student")
    first = make_user("student")
    second = make_user("teacher")
    conversation = ConversationRepository(session).create(
        title="Study group", is_group=True, participant_ids=[sender.id, first.id, second.id]
    )

    recipients = FanOutPolicy(session).message_sent(conversation.id, sender.id)

    assert recipients == [first.id, second.id]


def test_duplicates_and_unknown_users_are_dropped(session, make_user):
    user = make_user("student")

    assert FanOutPolicy(session).system([user.id, user.id, None, 9999]) == [user.id]
