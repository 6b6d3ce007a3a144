"""Tests for MessageService."""

from app.schemas.conversation import MessageCreate
from app.services.message_service import MessageService


def test_create_user_message(db, setup_conversation):
    svc = MessageService(db)
    msg = svc.create_message(setup_conversation.id, MessageCreate(role="user", content="hi"))
    assert msg.id is not None
    assert msg.role == "user"
    assert msg.tokens_used is None
    assert msg.response_time_ms is None


def test_create_assistant_message_with_metadata(db, setup_conversation):
    svc = MessageService(db)
    msg = svc.create_message(
        setup_conversation.id,
        MessageCreate(role="assistant", content="hello", tokens_used=42, response_time_ms=310),
    )
    assert msg.tokens_used == 42
    assert msg.response_time_ms == 310


def test_get_recent_messages_last_ten_oldest_first(db, setup_conversation_with_messages):
    conversation, messages = setup_conversation_with_messages
    svc = MessageService(db)
    recent = svc.get_recent_messages(conversation.id, limit=10)
    assert [m.content for m in recent] == [m.content for m in messages[2:]]


def test_get_recent_messages_zero_limit(db, setup_conversation_with_messages):
    conversation, _ = setup_conversation_with_messages
    assert MessageService(db).get_recent_messages(conversation.id, limit=0) == []
