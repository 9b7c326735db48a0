"""Persistence helpers for notification preferences."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from lms.domain.entities import UserSettings
from lms.infrastructure.models import UserSettingsModel


class UserSettingsRepository:
    """Read and store :class:`UserSettings`, filling in defaults for missing rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> UserSettings:
        model = self.session.get(UserSettingsModel, user_id)
        return self._to_entity(model) if model else UserSettings(user_id=user_id)

    def get_map(self, user_ids: Sequence[int]) -> dict[int, UserSettings]:
        unique_ids = {int(user_id) for user_id in user_ids}
        if not unique_ids:
            return {}
        models = (
            self.session.query(UserSettingsModel)
            .filter(UserSettingsModel.user_id.in_(unique_ids))
            .all()
        )
        found = {model.user_id: self._to_entity(model) for model in models}
        return {
            user_id: found.get(user_id, UserSettings(user_id=user_id))
            for user_id in unique_ids
        }

    def save(self, settings: UserSettings) -> UserSettings:
        model = self.session.get(UserSettingsModel, settings.user_id)
        if model is None:
            model = UserSettingsModel(user_id=settings.user_id)
        model.assignment_notifications = settings.assignment_notifications
        model.message_notifications = settings.message_notifications
        model.announcement_notifications = settings.announcement_notifications
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserSettingsModel) -> UserSettings:
        return UserSettings(
            user_id=model.user_id,
            assignment_notifications=model.assignment_notifications,
            message_notifications=model.message_notifications,
            announcement_notifications=model.announcement_notifications,
        )


__all__ = ["UserSettingsRepository"]
