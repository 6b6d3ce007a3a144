from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class ProfileRead(BaseModel):
    """Caller's profile with the reward state."""

    id: UUID
    user_id: UUID
    email: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    total_points: int
    current_streak: int
    last_activity_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
