"""
Command handling one chat turn.

Resolves or creates the conversation, loads bounded history, calls the
completion service, stores both messages and dispatches reward accrual.
"""

from __future__ import annotations

import logging
import time
from datetime import date, datetime, timezone
from typing import Callable, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.adapters.gemini import ROLE_MODEL, ROLE_USER, GeminiClient, Turn
from app.auth.current_user import CurrentUser
from app.config import get_settings
from app.constants.default_system_prompt import DefaultSystemPrompt
from app.core.content_filter import is_flagged
from app.exceptions import ConversationNotFoundError
from app.models.conversation import Conversation
from app.models.message import ROLE_ASSISTANT, Message
from app.schemas.chat import ChatRequest, ChatResponse
from app.schemas.conversation import MessageCreate
from app.services.conversation_service import ConversationService
from app.services.message_service import MessageService
from app.services.style_pack_service import StylePackService
from app.tasks.reward_task import dispatch_reward_accrual

RewardDispatcher = Callable[[UUID, bool, date], object]


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def build_turns(system_prompt: str, history: List[Message], message: str) -> List[Turn]:
    """System framing, acknowledgement, history (oldest first), then the new message."""
    turns = [
        Turn(role=ROLE_USER, text=system_prompt),
        Turn(role=ROLE_MODEL, text=DefaultSystemPrompt.ACKNOWLEDGEMENT),
    ]
    for msg in history:
        role = ROLE_MODEL if msg.role == ROLE_ASSISTANT else ROLE_USER
        turns.append(Turn(role=role, text=str(msg.content)))
    turns.append(Turn(role=ROLE_USER, text=message))
    return turns


class SendMessageCommand:
    def __init__(
        self,
        db: Session,
        completion_client: Optional[GeminiClient] = None,
        reward_dispatcher: Optional[RewardDispatcher] = None,
        today_provider: Optional[Callable[[], date]] = None,
    ) -> None:
        self.db = db
        self.settings = get_settings()
        self.conversation_service = ConversationService(db)
        self.message_service = MessageService(db)
        self.style_pack_service = StylePackService(db)
        self.completion_client = completion_client or GeminiClient()
        self.reward_dispatcher = reward_dispatcher or dispatch_reward_accrual
        self.today_provider = today_provider or utc_today
        self.logger = logging.getLogger(__name__)

    def execute(self, user: CurrentUser, request: ChatRequest) -> ChatResponse:
        """
        Run one turn for the authenticated user.

        Raises:
            ConversationNotFoundError: conversationId is unknown or not owned.
            UpstreamError: the completion service failed; nothing is stored.
        """
        start = time.monotonic()
        self.logger.info("Processing message for user: %s", user.id)

        conversation = self._resolve_conversation(user.id, request)
        history = self.message_service.get_recent_messages(
            conversation.id, limit=self.settings.history_limit
        )
        system_prompt = (
            self.style_pack_service.get_system_prompt(request.style_pack_id)
            or DefaultSystemPrompt.CONTENT
        )

        turns = build_turns(system_prompt, history, request.message)
        completion = self.completion_client.generate(turns)
        response_time = int((time.monotonic() - start) * 1000)

        self._save_message(
            conversation.id,
            MessageCreate(role="user", content=request.message),
        )
        self._save_message(
            conversation.id,
            MessageCreate(
                role="assistant",
                content=completion.text,
                tokens_used=completion.tokens_used,
                response_time_ms=response_time,
            ),
        )

        flagged = is_flagged(request.message)
        if flagged:
            self.logger.info("Message flagged; no reward for user %s", user.id)
        else:
            self._dispatch_rewards(user.id, request.is_boost)

        return ChatResponse(
            response=completion.text,
            conversation_id=conversation.id,
            tokens_used=completion.tokens_used,
            response_time=response_time,
            points_awarded=not flagged,
        )

    def _resolve_conversation(self, user_id: UUID, request: ChatRequest) -> Conversation:
        if request.conversation_id is None:
            return self.conversation_service.create_conversation(user_id, request.message)
        conversation = self.conversation_service.get_conversation(
            user_id, request.conversation_id
        )
        if conversation is None:
            raise ConversationNotFoundError(
                f"Conversation {request.conversation_id} not found"
            )
        return conversation

    def _save_message(self, conversation_id: UUID, data: MessageCreate) -> None:
        """Best effort: a failed write is logged and the turn continues."""
        try:
            self.message_service.create_message(conversation_id, data)
        except Exception as e:
            self.db.rollback()
            self.logger.warning("Error saving %s message: %s", data.role, e)

    def _dispatch_rewards(self, user_id: UUID, is_boost: bool) -> None:
        try:
            self.reward_dispatcher(user_id, is_boost, self.today_provider())
        except Exception as e:
            self.logger.warning("Error dispatching rewards for %s: %s", user_id, e)
