"""Celery task for post-turn reward accrual."""

from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from celery.result import AsyncResult

from app.infra.celery_app import celery_app
from app.infra.logging_config import get_logger
from app.services.reward_service import RewardService
from app.utils.db.db_session_helper import db_session

logger = get_logger("reward_task")


@celery_app.task(name="app.tasks.reward_task.accrue_rewards_task")
def accrue_rewards_task(
    user_id_str: str, is_boost: bool, today_iso: str
) -> Optional[int]:
    """
    Apply reward accrual for one turn.
    Returns the point delta, or None when the user has no profile.
    """
    user_id = UUID(user_id_str)
    today = date.fromisoformat(today_iso)
    with db_session() as db:
        result = RewardService(db).accrue(user_id, is_boost=is_boost, today=today)
    if result is None:
        return None
    return result.points_to_add


def dispatch_reward_accrual(
    user_id: UUID, is_boost: bool, today: date
) -> Optional[AsyncResult]:
    """
    Queue accrual without blocking the caller.
    Dispatch failures are logged and swallowed; returns None in that case.
    """
    try:
        return accrue_rewards_task.delay(str(user_id), bool(is_boost), today.isoformat())
    except Exception as e:
        logger.warning("Failed to dispatch reward accrual for %s: %s", user_id, e)
        return None
