"""Best-effort persistence of one notification per recipient."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from lms.application.use_cases.notifications import NotificationEvent, NotificationWriter
from lms.infrastructure.repositories import NotificationRepository

EVENT = NotificationEvent(
    type="assignment",
    title="New Assignment Posted",
    message='A new assignment "Essay" has been posted in Writing. Due: Jun 1, 2025.',
    related_id=7,
    subject_title="Essay",
)


class FlakyRepository(NotificationRepository):
    """Fail the insert for a single recipient."""

    def __init__(self, session, failing_user_id: int) -> None:
        super().__init__(session)
        self.failing_user_id = failing_user_id

    def create(self, notification):
        if notification.user_id == self.failing_user_id:
            raise RuntimeError("disk full")
        return super().create(notification)


def test_one_row_per_recipient_with_event_fields(session, make_user):
    first = make_user("student")
    second = make_user("student")

    results = NotificationWriter(session).notify(EVENT, [first.id, second.id])

    assert [result.user_id for result in results] == [first.id, second.id]
    assert all(result.delivered for result in results)
    repository = NotificationRepository(session)
    for user in (first, second):
        (notification,) = repository.list_for_user(user.id)
        assert notification.title == EVENT.title
        assert notification.message == EVENT.message
        assert notification.type == "assignment"
        assert notification.related_id == 7
        assert notification.subject_title == "Essay"
        assert notification.is_read is False


def test_empty_recipient_list_writes_nothing(session, make_user):
    user = make_user("student")

    assert NotificationWriter(session).notify(EVENT, []) == []
    assert NotificationRepository(session).list_for_user(user.id) == []


def test_failure_for_one_recipient_does_not_stop_the_others(session, make_user, caplog):
    first = make_user("student")
    broken = make_user("student")
    last = make_user("student")
    writer = NotificationWriter(
        session, repository=FlakyRepository(session, failing_user_id=broken.id)
    )

    with caplog.at_level(logging.ERROR):
        results = writer.notify(EVENT, [first.id, broken.id, last.id])

    outcome = {result.user_id: result for result in results}
    assert outcome[first.id].delivered
    assert outcome[last.id].delivered
    assert not outcome[broken.id].delivered
    assert outcome[broken.id].error == "disk full"
    assert "Failed to write 'assignment' notification" in caplog.text

    repository = NotificationRepository(session)
    assert repository.count_unread(first.id) == 1
    assert repository.count_unread(broken.id) == 0
    assert repository.count_unread(last.id) == 1


def test_created_at_comes_from_the_clock(session, make_user):
    user = make_user("student")
    moment = datetime(2025, 3, 4, 10, 30, tzinfo=timezone.utc)

    NotificationWriter(session, clock=lambda: moment).notify(EVENT, [user.id])

    (notification,) = NotificationRepository(session).list_for_user(user.id)
    assert notification.created_at == moment
