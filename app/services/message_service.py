"""Message persistence and history reads."""

from __future__ import annotations

from typing import List
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from app.models.message import Message
from app.schemas.conversation import MessageCreate


class MessageService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create_message(self, conversation_id: UUID, data: MessageCreate) -> Message:
        msg = Message(conversation_id=conversation_id, **data.model_dump())
        self.db.add(msg)
        self.db.commit()
        self.db.refresh(msg)
        return msg

    def get_recent_messages(self, conversation_id: UUID, limit: int = 10) -> List[Message]:
        """The last ``limit`` messages of a conversation, oldest first."""
        if limit <= 0:
            return []
        newest_first = (
            self.db.query(Message)
            .filter(Message.conversation_id == conversation_id)
            .order_by(Message.created_at.desc())
            .limit(limit)
            .all()
        )
        return list(reversed(newest_first))

    def get_messages_query(self, conversation_id: UUID) -> Select:
        """Select statement for all messages of a conversation, oldest first."""
        return (
            select(Message)
            .where(Message.conversation_id == conversation_id)
            .order_by(Message.created_at.asc())
        )
