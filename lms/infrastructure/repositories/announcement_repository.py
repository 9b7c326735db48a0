"""Persistence helpers for announcements."""

from __future__ import annotations

from sqlalchemy.orm import Session

from lms.domain.entities import Announcement
from lms.infrastructure.models import AnnouncementModel


class AnnouncementRepository:
    """Provide CRUD operations for :class:`Announcement` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, announcement_id: int) -> Announcement | None:
        model = self.session.get(AnnouncementModel, announcement_id)
        return self._to_entity(model) if model else None

    def create(self, announcement: Announcement) -> Announcement:
        model = AnnouncementModel(
            author_id=announcement.author_id,
            title=announcement.title,
            content=announcement.content,
            target=announcement.target,
            campus=announcement.campus,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, announcement: Announcement) -> Announcement:
        model = self.session.get(AnnouncementModel, announcement.id)
        if model is None:
            msg = f"Announcement with id {announcement.id} not found"
            raise ValueError(msg)
        model.title = announcement.title
        model.content = announcement.content
        model.target = announcement.target
        model.campus = announcement.campus
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: AnnouncementModel) -> Announcement:
        return Announcement(
            id=model.id,
            author_id=model.author_id,
            title=model.title,
            content=model.content,
            target=model.target,
            campus=model.campus,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["AnnouncementRepository"]
