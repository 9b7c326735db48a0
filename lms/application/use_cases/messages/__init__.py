"""Use cases for conversations and messages."""

from .create_conversation import create_conversation
from .send_message import send_message

__all__ = ["create_conversation", "send_message"]
