"""Fixtures for conversations and messages."""

from datetime import datetime, timedelta, timezone

import pytest

from app.models.conversation import Conversation
from app.models.message import Message


@pytest.fixture(scope="function")
def setup_conversation(db, faker, setup_profile):
    conversation = Conversation(user_id=setup_profile.user_id, title=faker.sentence())
    db.add(conversation)
    db.commit()
    db.refresh(conversation)
    return conversation


@pytest.fixture(scope="function")
def setup_conversation_with_messages(db, faker, setup_conversation):
    """
    Conversation with 12 alternating messages at increasing timestamps.
    Returns (Conversation, list of Message in creation order).
    """
    base = datetime.now(timezone.utc) - timedelta(hours=1)
    messages = []
    for i in range(12):
        msg = Message(
            conversation_id=setup_conversation.id,
            role="user" if i % 2 == 0 else "assistant",
            content=f"message {i}",
            created_at=base + timedelta(seconds=i),
        )
        db.add(msg)
        messages.append(msg)
    db.commit()
    for m in messages:
        db.refresh(m)
    return setup_conversation, messages


@pytest.fixture(scope="function")
def setup_other_conversation(db, faker, setup_other_profile):
    conversation = Conversation(
        user_id=setup_other_profile.user_id, title=faker.sentence()
    )
    db.add(conversation)
    db.commit()
    db.refresh(conversation)
    return conversation
