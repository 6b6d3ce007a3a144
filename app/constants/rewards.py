from enum import Enum


class RewardType(str, Enum):
    """Ledger entry categories."""

    MESSAGE = "message"
    STREAK = "streak"
    BOOST = "boost"
    STYLE_PACK = "style_pack"


BASE_MESSAGE_POINTS = 1
STREAK_BONUS_POINTS = 5
BOOST_COST = 10

# Case-insensitive substring screen; a hit suppresses accrual for the turn.
BANNED_WORDS = frozenset({"violence", "hate", "illegal", "harmful"})
