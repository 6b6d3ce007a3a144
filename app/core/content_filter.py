from typing import Iterable

from app.constants.rewards import BANNED_WORDS


def is_flagged(text: str, banned_words: Iterable[str] = BANNED_WORDS) -> bool:
    """True when any banned word occurs in text, ignoring case."""
    lowered = (text or "").lower()
    return any(word.lower() in lowered for word in banned_words)
