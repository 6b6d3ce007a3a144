"""Conversation model: one row per chat thread owned by a single user."""

from __future__ import annotations

import uuid

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship

from app.db import Base
from app.models.mixins import TimestampMixin

DEFAULT_CONVERSATION_TITLE = "New Conversation"


class Conversation(Base, TimestampMixin):
    __tablename__ = "conversations"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    title = Column(String(256), nullable=False, default=DEFAULT_CONVERSATION_TITLE)

    messages = relationship(
        "Message",
        back_populates="conversation",
        cascade="all, delete-orphan",
        order_by="Message.created_at",
    )
