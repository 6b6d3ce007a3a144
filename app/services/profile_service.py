"""Profile lookup and first-authentication provisioning."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.profile import Profile


class ProfileService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_profile(self, user_id: UUID) -> Optional[Profile]:
        return self.db.query(Profile).filter(Profile.user_id == user_id).first()

    def get_or_create_profile(
        self,
        user_id: UUID,
        email: str,
        display_name: Optional[str] = None,
    ) -> Profile:
        """
        Return the user's profile, creating it on first authentication.
        Display name falls back to the local part of the email.
        """
        profile = self.get_profile(user_id)
        if profile is not None:
            return profile
        profile = Profile(
            user_id=user_id,
            email=email or "",
            display_name=display_name or (email or "").split("@", 1)[0] or None,
            total_points=0,
            current_streak=0,
        )
        self.db.add(profile)
        try:
            self.db.commit()
        except IntegrityError:
            # Concurrent first request created it.
            self.db.rollback()
            existing = self.get_profile(user_id)
            if existing is None:
                raise
            return existing
        self.db.refresh(profile)
        return profile
