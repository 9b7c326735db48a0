"""Use case for posting a message to a conversation."""

from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import notify_message_sent
from lms.domain.entities import Message, User
from lms.infrastructure.repositories import ConversationRepository
from lms.utils import now_in_app_naive_datetime


def send_message(
    session: Session, *, sender: User, conversation_id: int, content: str
) -> Message:
    """Store the message and notify every other participant."""

    repository = ConversationRepository(session)
    conversation = repository.get(conversation_id)
    if conversation is None:
        raise LookupError("Conversation not found")
    if sender.id not in conversation.participant_ids:
        raise PermissionError("You are not a participant of this conversation")

    normalized = content.strip()
    if not normalized:
        raise ValueError("Message content must not be empty")

    saved = repository.add_message(
        Message(id=None, conversation_id=conversation_id, sender_id=sender.id, content=normalized),
        sent_at=now_in_app_naive_datetime(),
    )
    notify_message_sent(session, conversation_id=conversation_id, sender=sender)
    return saved
