"""Pydantic schemas for style packs and purchases."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class StylePackRead(BaseModel):
    """Public view of a style pack; the system prompt itself is not exposed."""

    id: UUID
    name: str
    description: Optional[str] = None
    cost: int
    is_active: bool

    model_config = {"from_attributes": True}


class UserStylePackRead(BaseModel):
    id: UUID
    user_id: UUID
    style_pack_id: UUID
    purchased_at: datetime
    style_pack: Optional[StylePackRead] = None

    model_config = {"from_attributes": True}
