from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from app.constants.rewards import RewardType


class RewardRead(BaseModel):
    """One ledger entry."""

    id: UUID
    user_id: UUID
    type: RewardType
    points: int
    description: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
