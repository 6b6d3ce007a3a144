"""Pydantic schemas for conversations and messages."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel

MessageRole = Literal["user", "assistant"]


class ConversationRead(BaseModel):
    id: UUID
    user_id: UUID
    title: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MessageCreate(BaseModel):
    """Schema for persisting one side of a turn."""

    role: MessageRole
    content: str
    tokens_used: Optional[int] = None
    response_time_ms: Optional[int] = None


class MessageRead(MessageCreate):
    id: UUID
    conversation_id: UUID
    created_at: datetime

    model_config = {"from_attributes": True}
