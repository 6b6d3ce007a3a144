"""
Reward ledger model.

Append-only: rows are inserted by reward accrual and never updated or
deleted. Summing points per user reconstructs the accrued total.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text, Uuid

from app.db import Base


class Reward(Base):
    __tablename__ = "rewards"

    __table_args__ = (
        CheckConstraint(
            "type IN ('message', 'streak', 'boost', 'style_pack')",
            name="ck_rewards_type",
        ),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    type = Column(String(32), nullable=False)
    points = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(
        DateTime, default=lambda: datetime.now(timezone.utc), nullable=False
    )
