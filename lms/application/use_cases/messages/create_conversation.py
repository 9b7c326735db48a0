"""Use case for starting a conversation."""

from sqlalchemy.orm import Session

from lms.domain.entities import Conversation, User
from lms.infrastructure.repositories import ConversationRepository, UserRepository


def create_conversation(
    session: Session,
    *,
    creator: User,
    participant_ids: list[int],
    title: str | None = None,
) -> Conversation:
    """Create a conversation, reusing an existing one-to-one thread."""

    members = list(dict.fromkeys([creator.id, *participant_ids]))
    if len(members) < 2:
        raise ValueError("A conversation needs at least one other participant")

    users = UserRepository(session).get_map_by_ids(members)
    missing = [user_id for user_id in members if user_id not in users or not users[user_id].is_active]
    if missing:
        raise ValueError(f"Unknown participants: {', '.join(str(i) for i in missing)}")

    repository = ConversationRepository(session)
    is_group = len(members) > 2
    if not is_group:
        existing = repository.find_direct(members[0], members[1])
        if existing is not None:
            return existing

    normalized_title = title.strip() if title and title.strip() else None
    return repository.create(
        title=normalized_title, is_group=is_group, participant_ids=members
    )
