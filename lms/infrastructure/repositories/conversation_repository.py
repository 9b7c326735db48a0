"""Persistence helpers for conversations and their messages."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from sqlalchemy.orm import Session

from lms.domain.entities import Conversation, Message
from lms.infrastructure.models import (
    ConversationModel,
    ConversationParticipantModel,
    MessageModel,
)


class ConversationRepository:
    """Store conversations, their participants and posted messages."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, conversation_id: int) -> Conversation | None:
        model = self.session.get(ConversationModel, conversation_id)
        return self._to_entity(model) if model else None

    def create(
        self, *, title: str | None, is_group: bool, participant_ids: Iterable[int]
    ) -> Conversation:
        model = ConversationModel(title=title, is_group=is_group)
        for user_id in dict.fromkeys(participant_ids):
            model.participants.append(ConversationParticipantModel(user_id=user_id))
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def find_direct(self, first_user_id: int, second_user_id: int) -> Conversation | None:
        """Return the existing one-to-one conversation between two users."""

        candidates = (
            self.session.query(ConversationModel)
            .join(ConversationParticipantModel)
            .filter(ConversationModel.is_group.is_(False))
            .filter(ConversationParticipantModel.user_id == first_user_id)
            .all()
        )
        for model in candidates:
            members = {participant.user_id for participant in model.participants}
            if members == {first_user_id, second_user_id}:
                return self._to_entity(model)
        return None

    def list_participant_ids(self, conversation_id: int) -> list[int]:
        query = (
            self.session.query(ConversationParticipantModel.user_id)
            .filter(ConversationParticipantModel.conversation_id == conversation_id)
            .order_by(ConversationParticipantModel.user_id)
        )
        return [user_id for (user_id,) in query.all()]

    def add_message(self, message: Message, *, sent_at: datetime) -> Message:
        model = MessageModel(
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            content=message.content,
            created_at=sent_at,
        )
        self.session.add(model)
        self.session.query(ConversationModel).filter(
            ConversationModel.id == message.conversation_id
        ).update({ConversationModel.updated_at: sent_at}, synchronize_session=False)
        self.session.commit()
        self.session.refresh(model)
        return Message(
            id=model.id,
            conversation_id=model.conversation_id,
            sender_id=model.sender_id,
            content=model.content,
            created_at=model.created_at,
        )

    @staticmethod
    def _to_entity(model: ConversationModel) -> Conversation:
        return Conversation(
            id=model.id,
            title=model.title,
            is_group=model.is_group,
            participant_ids=sorted(p.user_id for p in model.participants),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["ConversationRepository"]
