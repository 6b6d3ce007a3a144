"""Request/response contract for a chat turn (camelCase on the wire)."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ChatRequest(BaseModel):
    """One user message; omit conversationId to start a new conversation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    conversation_id: Optional[UUID] = None
    style_pack_id: Optional[UUID] = None
    is_boost: bool = False


class ChatResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    response: str
    conversation_id: UUID
    tokens_used: int
    response_time: int
    points_awarded: bool


class ErrorResponse(BaseModel):
    error: str
    details: str
