"""
Points and streak arithmetic for one turn.

Pure functions over the profile's current state; persistence lives in
RewardService. ``today`` is always passed in so results are deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from app.constants.rewards import (
    BASE_MESSAGE_POINTS,
    BOOST_COST,
    STREAK_BONUS_POINTS,
    RewardType,
)


@dataclass(frozen=True)
class AccrualResult:
    """Outcome of one accrual: the delta, the new streak and the ledger tag."""

    points_to_add: int
    new_streak: int
    last_activity_date: date
    reward_type: Optional[RewardType]
    description: Optional[str]


def compute_accrual(
    total_points: int,
    current_streak: int,
    last_activity_date: Optional[date],
    is_boost: bool,
    today: date,
) -> AccrualResult:
    """
    Derive the point delta and streak for a turn taken on ``today``.

    Same day: no bonus, streak unchanged. Previous day: streak + 1 and a
    streak bonus. Any gap (or no prior activity): streak restarts at 1.
    A boost with at least BOOST_COST points nets BOOST_COST against the
    delta rather than debiting the stored total separately.
    """
    points_to_add = BASE_MESSAGE_POINTS
    new_streak = current_streak or 0
    yesterday = today - timedelta(days=1)

    if last_activity_date is not None and last_activity_date >= today:
        pass
    elif last_activity_date == yesterday:
        new_streak += 1
        points_to_add += STREAK_BONUS_POINTS
    else:
        new_streak = 1

    if is_boost and (total_points or 0) >= BOOST_COST:
        points_to_add -= BOOST_COST

    # Never move the activity date backwards.
    if last_activity_date is not None and last_activity_date > today:
        next_activity_date = last_activity_date
    else:
        next_activity_date = today

    reward_type, description = _ledger_entry(points_to_add, new_streak)
    return AccrualResult(
        points_to_add=points_to_add,
        new_streak=new_streak,
        last_activity_date=next_activity_date,
        reward_type=reward_type,
        description=description,
    )


def _ledger_entry(
    points_to_add: int, streak: int
) -> tuple[Optional[RewardType], Optional[str]]:
    if points_to_add == 0:
        return None, None
    if points_to_add > 1:
        return RewardType.STREAK, f"Daily streak: {streak} days"
    if points_to_add > 0:
        return RewardType.MESSAGE, "Message sent"
    return RewardType.BOOST, "Boost used"
