"""Profile model: one row per user holding the points/streak state."""

from __future__ import annotations

import uuid

from sqlalchemy import Column, Date, Integer, String, Uuid

from app.db import Base
from app.models.mixins import TimestampMixin


class Profile(Base, TimestampMixin):
    """Per-user reward state. Only reward accrual mutates points and streak."""

    __tablename__ = "profiles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), unique=True, nullable=False, index=True)
    email = Column(String(320), nullable=False)
    display_name = Column(String(256), nullable=True)
    avatar_url = Column(String(1024), nullable=True)
    total_points = Column(Integer, nullable=False, default=0)
    current_streak = Column(Integer, nullable=False, default=0)
    last_activity_date = Column(Date, nullable=True)
