"""Conversations API: list, get, delete, messages."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi_pagination import Page, Params
from fastapi_pagination.ext.sqlalchemy import paginate
from sqlalchemy.orm import Session

from app.auth.current_user import CurrentUser, get_current_user
from app.db import get_db
from app.models.conversation import Conversation
from app.routers.utils.dependencies import get_owned_conversation
from app.schemas.conversation import ConversationRead, MessageRead
from app.services.conversation_service import ConversationService
from app.services.message_service import MessageService

router = APIRouter(
    prefix="/conversations",
    tags=["conversations"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=Page[ConversationRead])
def list_conversations(
    params: Params = Depends(),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Page[ConversationRead]:
    """List the caller's conversations, most recently updated first."""
    query = ConversationService(db).get_conversations_query(current_user.id)
    return paginate(
        db,
        query,
        params=params,
        transformer=lambda items: [ConversationRead.model_validate(c) for c in items],
    )


@router.get("/{conversation_id}", response_model=ConversationRead)
def get_conversation(
    conversation: Conversation = Depends(get_owned_conversation),
) -> ConversationRead:
    """Get one of the caller's conversations."""
    return ConversationRead.model_validate(conversation)


@router.delete("/{conversation_id}", status_code=204)
def delete_conversation(
    conversation: Conversation = Depends(get_owned_conversation),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> None:
    """Delete a conversation and all of its messages."""
    ConversationService(db).delete_conversation(current_user.id, conversation.id)


@router.get("/{conversation_id}/messages", response_model=Page[MessageRead])
def list_conversation_messages(
    conversation: Conversation = Depends(get_owned_conversation),
    params: Params = Depends(),
    db: Session = Depends(get_db),
) -> Page[MessageRead]:
    """List messages of a conversation, oldest first."""
    query = MessageService(db).get_messages_query(conversation.id)
    return paginate(
        db,
        query,
        params=params,
        transformer=lambda items: [MessageRead.model_validate(m) for m in items],
    )
