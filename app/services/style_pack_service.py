"""Style pack catalogue, prompt resolution and purchases."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.style_pack import StylePack, UserStylePack


class StylePackAlreadyOwnedError(ValueError):
    pass


class StylePackService:
    """Reads active packs and records purchases. Does not touch points."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_active_style_packs(self) -> List[StylePack]:
        return (
            self.db.query(StylePack)
            .filter(StylePack.is_active.is_(True))
            .order_by(StylePack.name)
            .all()
        )

    def get_active_style_pack(self, style_pack_id: UUID) -> Optional[StylePack]:
        return (
            self.db.query(StylePack)
            .filter(StylePack.id == style_pack_id, StylePack.is_active.is_(True))
            .first()
        )

    def get_system_prompt(self, style_pack_id: Optional[UUID]) -> Optional[str]:
        """System prompt of an active pack, or None when absent or unknown."""
        if style_pack_id is None:
            return None
        pack = self.get_active_style_pack(style_pack_id)
        if pack is None:
            return None
        return str(pack.system_prompt)

    def get_purchased_style_packs(self, user_id: UUID) -> List[UserStylePack]:
        return (
            self.db.query(UserStylePack)
            .filter(UserStylePack.user_id == user_id)
            .order_by(UserStylePack.purchased_at.desc())
            .all()
        )

    def purchase(self, user_id: UUID, style_pack_id: UUID) -> UserStylePack:
        """
        Link the pack to the user.
        Raises StylePackAlreadyOwnedError if the link already exists.
        """
        link = UserStylePack(user_id=user_id, style_pack_id=style_pack_id)
        self.db.add(link)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise StylePackAlreadyOwnedError(
                f"Style pack {style_pack_id} already owned"
            ) from e
        self.db.refresh(link)
        return link
