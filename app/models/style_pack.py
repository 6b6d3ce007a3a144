"""Style packs (purchasable system prompts) and per-user purchase links."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from app.db import Base

DEFAULT_STYLE_PACK_COST = 5


class StylePack(Base):
    """Named system-prompt preset; visible to everyone while active."""

    __tablename__ = "style_packs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    system_prompt = Column(Text, nullable=False)
    cost = Column(Integer, nullable=False, default=DEFAULT_STYLE_PACK_COST)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(
        DateTime, default=lambda: datetime.now(timezone.utc), nullable=False
    )


class UserStylePack(Base):
    """One row per (user, style pack) purchase; duplicates rejected by constraint."""

    __tablename__ = "user_style_packs"

    __table_args__ = (
        UniqueConstraint("user_id", "style_pack_id", name="uq_user_style_packs"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    style_pack_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("style_packs.id", ondelete="CASCADE"),
        nullable=False,
    )
    purchased_at = Column(
        DateTime, default=lambda: datetime.now(timezone.utc), nullable=False
    )

    style_pack = relationship("StylePack")
