"""Use cases for publishing and editing announcements."""

from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import notify_announcement_published
from lms.domain.entities import ALL_CAMPUSES, ANNOUNCEMENT_TARGETS, TARGET_ALL, Announcement, User
from lms.infrastructure.repositories import AnnouncementRepository


def _validate(title: str, content: str, target: str) -> tuple[str, str]:
    normalized_title = title.strip()
    normalized_content = content.strip()
    if not normalized_title or not normalized_content:
        raise ValueError("Announcement title and content are required")
    if target not in ANNOUNCEMENT_TARGETS:
        raise ValueError(f"Target must be one of: {', '.join(ANNOUNCEMENT_TARGETS)}")
    return normalized_title, normalized_content


def publish_announcement(
    session: Session,
    *,
    author: User,
    title: str,
    content: str,
    target: str = TARGET_ALL,
    campus: str | None = None,
) -> Announcement:
    """Store the announcement and notify its audience."""

    if author.is_student():
        raise PermissionError("Students cannot publish announcements")

    normalized_title, normalized_content = _validate(title, content, target)
    announcement = Announcement(
        id=None,
        author_id=author.id,
        title=normalized_title,
        content=normalized_content,
        target=target,
        campus=(campus or ALL_CAMPUSES).strip(),
    )
    saved = AnnouncementRepository(session).create(announcement)
    notify_announcement_published(session, announcement=saved, author=author)
    return saved


def update_announcement(
    session: Session,
    *,
    editor: User,
    announcement_id: int,
    title: str,
    content: str,
    target: str,
    campus: str | None = None,
) -> Announcement:
    """Rewrite an announcement and notify its (possibly new) audience again."""

    repository = AnnouncementRepository(session)
    announcement = repository.get(announcement_id)
    if announcement is None:
        raise LookupError("Announcement not found")
    if announcement.author_id != editor.id and not editor.is_admin():
        raise PermissionError("Only the author can edit this announcement")

    announcement.title, announcement.content = _validate(title, content, target)
    announcement.target = target
    announcement.campus = (campus or ALL_CAMPUSES).strip()
    saved = repository.update(announcement)
    notify_announcement_published(
        session, announcement=saved, author=editor, is_update=True
    )
    return saved
