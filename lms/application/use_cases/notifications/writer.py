"""Persist one notification row per recipient of an event."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from lms.domain.entities import Notification
from lms.infrastructure.repositories import NotificationRepository
from lms.utils import now_in_app_timezone

from .events import NotificationEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of writing ``event`` for a single recipient."""

    user_id: int
    notification_id: int | None = None
    error: str | None = None

    @property
    def delivered(self) -> bool:
        return self.notification_id is not None and self.error is None


class NotificationWriter:
    """Write notifications best-effort, one independent commit per recipient.

    A failing recipient is rolled back, logged and reported in the returned
    results; the remaining recipients are still attempted and the caller's
    operation is never failed by a notification.
    """

    def __init__(
        self,
        session: Session,
        *,
        repository: NotificationRepository | None = None,
        clock: Callable[[], datetime] = now_in_app_timezone,
    ) -> None:
        self.session = session
        self.repository = repository or NotificationRepository(session)
        self.clock = clock

    def notify(
        self, event: NotificationEvent, recipients: Iterable[int]
    ) -> list[DeliveryResult]:
        results: list[DeliveryResult] = []
        for user_id in recipients:
            results.append(self._deliver(event, user_id))

        if results:
            failed = sum(1 for result in results if not result.delivered)
            logger.info(
                "Notification '%s' (%s) delivered to %d of %d recipients",
                event.title,
                event.type,
                len(results) - failed,
                len(results),
            )
        return results

    def _deliver(self, event: NotificationEvent, user_id: int) -> DeliveryResult:
        notification = Notification(
            id=None,
            user_id=user_id,
            title=event.title,
            message=event.message,
            type=event.type,
            related_id=event.related_id,
            created_at=self.clock(),
            actor_name=event.actor_name,
            subject_title=event.subject_title,
        )
        try:
            saved = self.repository.create(notification)
        except Exception as exc:  # noqa: BLE001
            self.session.rollback()
            logger.exception(
                "Failed to write '%s' notification for user %s", event.type, user_id
            )
            return DeliveryResult(user_id=user_id, error=str(exc) or exc.__class__.__name__)
        return DeliveryResult(user_id=user_id, notification_id=saved.id)


__all__ = ["DeliveryResult", "NotificationWriter"]
