from uuid import UUID

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from app.auth.current_user import CurrentUser, get_current_user
from app.db import get_db
from app.models.conversation import Conversation
from app.services.conversation_service import ConversationService


def get_owned_conversation(
    conversation_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Conversation:
    """FastAPI dependency to get a conversation owned by the caller."""
    conversation = ConversationService(db).get_conversation(
        current_user.id, conversation_id
    )
    if conversation is None:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return conversation
