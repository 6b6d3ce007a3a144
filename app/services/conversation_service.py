"""Owner-scoped conversation CRUD."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from app.models.conversation import Conversation

TITLE_MAX_CHARS = 50
TITLE_ELLIPSIS = "..."


def title_from_message(message: str) -> str:
    """First 50 characters of the message, with an ellipsis when truncated."""
    if len(message) > TITLE_MAX_CHARS:
        return message[:TITLE_MAX_CHARS] + TITLE_ELLIPSIS
    return message


class ConversationService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_conversation(
        self, user_id: UUID, conversation_id: UUID
    ) -> Optional[Conversation]:
        """Fetch a conversation only if it belongs to user_id."""
        return (
            self.db.query(Conversation)
            .filter(
                Conversation.id == conversation_id,
                Conversation.user_id == user_id,
            )
            .first()
        )

    def get_conversations_query(self, user_id: UUID) -> Select:
        """Select statement for the user's conversations (for pagination)."""
        return (
            select(Conversation)
            .where(Conversation.user_id == user_id)
            .order_by(Conversation.updated_at.desc())
        )

    def create_conversation(self, user_id: UUID, first_message: str) -> Conversation:
        conversation = Conversation(
            user_id=user_id,
            title=title_from_message(first_message),
        )
        self.db.add(conversation)
        self.db.commit()
        self.db.refresh(conversation)
        return conversation

    def delete_conversation(self, user_id: UUID, conversation_id: UUID) -> bool:
        """Delete a conversation and its messages. Returns True if deleted."""
        conversation = self.get_conversation(user_id, conversation_id)
        if conversation is None:
            return False
        self.db.delete(conversation)
        self.db.commit()
        return True
