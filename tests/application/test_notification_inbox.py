"""Per-user read, count, mark and clear operations."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lms.application.use_cases.notifications import (
    NotificationEvent,
    NotificationWriter,
    clear_notifications,
    count_unread_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)

START = datetime(2025, 5, 1, 8, 0, tzinfo=timezone.utc)


def _seed(session, user_ids, count: int = 1) -> None:
    """Write ``count`` system notifications, one minute apart, to each user."""

    for index in range(count):
        moment = START + timedelta(minutes=index)
        event = NotificationEvent(type="system", title=f"Notice {index}", message="Hello")
        NotificationWriter(session, clock=lambda moment=moment: moment).notify(event, user_ids)


def test_list_is_newest_first_and_limited(session, make_user):
    user = make_user("student")
    _seed(session, [user.id], count=20)

    default_page = list_notifications(session, user_id=user.id)
    assert len(default_page) == 15
    assert default_page[0].title == "Notice 19"
    assert default_page[-1].title == "Notice 5"

    assert [n.title for n in list_notifications(session, user_id=user.id, limit=2)] == [
        "Notice 19",
        "Notice 18",
    ]


def test_same_timestamp_falls_back_to_newest_id(session, make_user):
    user = make_user("student")
    writer = NotificationWriter(session, clock=lambda: START)
    for title in ("first", "second"):
        writer.notify(NotificationEvent(type="system", title=title, message="-"), [user.id])

    assert [n.title for n in list_notifications(session, user_id=user.id)] == ["second", "first"]


@pytest.mark.parametrize("limit", [0, 101])
def test_limit_outside_bounds_is_rejected(session, make_user, limit):
    user = make_user("student")

    with pytest.raises(ValueError):
        list_notifications(session, user_id=user.id, limit=limit)


def test_marking_read_never_touches_another_users_rows(session, make_user):
    owner = make_user("student")
    other = make_user("student")
    _seed(session, [owner.id, other.id], count=2)
    (target, _) = list_notifications(session, user_id=owner.id)

    mark_notification_read(session, user_id=owner.id, notification_id=target.id)

    assert all(not n.is_read for n in list_notifications(session, user_id=other.id))
    assert count_unread_notifications(session, user_id=owner.id) == 1


def test_foreign_notification_is_reported_as_missing(session, make_user):
    owner = make_user("student")
    intruder = make_user("student")
    _seed(session, [owner.id])
    (notification,) = list_notifications(session, user_id=owner.id)

    with pytest.raises(LookupError) as foreign:
        mark_notification_read(session, user_id=intruder.id, notification_id=notification.id)
    with pytest.raises(LookupError) as missing:
        mark_notification_read(session, user_id=intruder.id, notification_id=424242)

    assert str(foreign.value) == str(missing.value)
    assert count_unread_notifications(session, user_id=owner.id) == 1


def test_mark_read_is_idempotent_and_monotonic(session, make_user):
    user = make_user("student")
    _seed(session, [user.id])
    (notification,) = list_notifications(session, user_id=user.id)

    first = mark_notification_read(session, user_id=user.id, notification_id=notification.id)
    second = mark_notification_read(session, user_id=user.id, notification_id=notification.id)
    mark_all_notifications_read(session, user_id=user.id)

    assert first.is_read and second.is_read
    session.expire_all()
    (stored,) = list_notifications(session, user_id=user.id)
    assert stored.is_read is True


def test_unread_count_tracks_the_unread_rows(session, make_user):
    user = make_user("student")
    other = make_user("student")
    _seed(session, [user.id, other.id], count=3)
    newest = list_notifications(session, user_id=user.id)[0]

    assert count_unread_notifications(session, user_id=user.id) == 3
    mark_notification_read(session, user_id=user.id, notification_id=newest.id)
    assert count_unread_notifications(session, user_id=user.id) == 2

    assert mark_all_notifications_read(session, user_id=user.id) == 2
    assert count_unread_notifications(session, user_id=user.id) == 0
    assert count_unread_notifications(session, user_id=other.id) == 3


def test_clear_is_total_for_the_caller_only(session, make_user):
    user = make_user("student")
    other = make_user("student")
    _seed(session, [user.id, other.id], count=4)

    assert clear_notifications(session, user_id=user.id) == 4
    assert list_notifications(session, user_id=user.id) == []
    assert len(list_notifications(session, user_id=other.id)) == 4
    assert clear_notifications(session, user_id=user.id) == 0
