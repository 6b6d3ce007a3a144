"""
Reward accrual and ledger reads.

Accrual loads the profile, computes the turn's delta with
``compute_accrual`` and writes the profile update plus at most one
ledger row in a single commit.
"""

from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import Select, select, update
from sqlalchemy.orm import Session

from app.core.rewards import AccrualResult, compute_accrual
from app.infra.logging_config import get_logger
from app.models.profile import Profile
from app.models.reward import Reward

logger = get_logger("rewards")


class RewardService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def accrue(
        self, user_id: UUID, is_boost: bool, today: date
    ) -> Optional[AccrualResult]:
        """
        Apply one turn's reward to the user's profile.

        Returns the computed result, or None when the user has no profile.
        total_points is incremented in SQL so concurrent accruals never
        lose points; streak and date are last-writer-wins.
        """
        profile = self.db.query(Profile).filter(Profile.user_id == user_id).first()
        if profile is None:
            logger.warning("No profile for user %s; skipping reward accrual", user_id)
            return None

        result = compute_accrual(
            total_points=profile.total_points,
            current_streak=profile.current_streak,
            last_activity_date=profile.last_activity_date,
            is_boost=is_boost,
            today=today,
        )

        self.db.execute(
            update(Profile)
            .where(Profile.user_id == user_id)
            .values(
                total_points=Profile.total_points + result.points_to_add,
                current_streak=result.new_streak,
                last_activity_date=result.last_activity_date,
            )
            .execution_options(synchronize_session=False)
        )

        if result.reward_type is not None:
            self.db.add(
                Reward(
                    user_id=user_id,
                    type=result.reward_type.value,
                    points=result.points_to_add,
                    description=result.description,
                )
            )
        self.db.commit()

        logger.info(
            "Accrued %s points for user %s (streak=%s)",
            result.points_to_add,
            user_id,
            result.new_streak,
        )
        return result

    def get_rewards_query(self, user_id: UUID) -> Select:
        return (
            select(Reward)
            .where(Reward.user_id == user_id)
            .order_by(Reward.created_at.desc())
        )

    def get_ledger_total(self, user_id: UUID) -> int:
        """Sum of all ledger deltas for the user."""
        return sum(r.points for r in self.db.query(Reward).filter(Reward.user_id == user_id))
