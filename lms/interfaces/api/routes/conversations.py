"""Routes for conversations and direct messages."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lms.application.use_cases.messages import create_conversation, send_message
from lms.domain.entities import User
from lms.infrastructure.database import get_db
from lms.interfaces.api.dependencies import get_current_active_user
from lms.interfaces.api.errors import to_http_error
from lms.interfaces.api.schemas import (
    ConversationCreate,
    ConversationRead,
    MessageCreate,
    MessageRead,
)

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.post("", response_model=ConversationRead, status_code=status.HTTP_201_CREATED)
def start_conversation(
    payload: ConversationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        conversation = create_conversation(
            db,
            creator=current_user,
            participant_ids=payload.participant_ids,
            title=payload.title,
        )
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return ConversationRead.model_validate(conversation)


@router.post(
    "/{conversation_id}/messages",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
)
def post_message(
    conversation_id: int,
    payload: MessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Send a message; the other participants are notified."""

    try:
        message = send_message(
            db,
            sender=current_user,
            conversation_id=conversation_id,
            content=payload.content,
        )
    except (ValueError, PermissionError, LookupError) as exc:
        raise to_http_error(exc) from exc
    return MessageRead.model_validate(message)
