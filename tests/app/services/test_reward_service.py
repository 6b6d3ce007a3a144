"""Tests for RewardService."""

import uuid
from datetime import timedelta

from app.models.reward import Reward
from app.services.reward_service import RewardService


def _rewards(db, user_id):
    return db.query(Reward).filter(Reward.user_id == user_id).all()


def test_accrue_no_profile_is_noop(db, today):
    svc = RewardService(db)
    assert svc.accrue(uuid.uuid4(), is_boost=False, today=today) is None
    assert db.query(Reward).count() == 0


def test_accrue_first_activity(db, setup_profile, today):
    svc = RewardService(db)
    result = svc.accrue(setup_profile.user_id, is_boost=False, today=today)
    assert result.points_to_add == 1

    db.refresh(setup_profile)
    assert setup_profile.total_points == 1
    assert setup_profile.current_streak == 1
    assert setup_profile.last_activity_date == today

    rewards = _rewards(db, setup_profile.user_id)
    assert len(rewards) == 1
    assert rewards[0].type == "message"
    assert rewards[0].points == 1


def test_accrue_consecutive_day(db, setup_active_profile, today):
    svc = RewardService(db)
    svc.accrue(setup_active_profile.user_id, is_boost=False, today=today)

    db.refresh(setup_active_profile)
    assert setup_active_profile.total_points == 31
    assert setup_active_profile.current_streak == 4
    rewards = _rewards(db, setup_active_profile.user_id)
    assert [(r.type, r.points) for r in rewards] == [("streak", 6)]
    assert rewards[0].description == "Daily streak: 4 days"


def test_accrue_same_day_twice(db, setup_profile, today):
    svc = RewardService(db)
    svc.accrue(setup_profile.user_id, is_boost=False, today=today)
    svc.accrue(setup_profile.user_id, is_boost=False, today=today)

    db.refresh(setup_profile)
    assert setup_profile.total_points == 2
    assert setup_profile.current_streak == 1
    assert len(_rewards(db, setup_profile.user_id)) == 2


def test_accrue_boost_same_day(db, setup_profile, today):
    setup_profile.total_points = 12
    setup_profile.current_streak = 2
    setup_profile.last_activity_date = today
    db.commit()

    RewardService(db).accrue(setup_profile.user_id, is_boost=True, today=today)

    db.refresh(setup_profile)
    assert setup_profile.total_points == 3
    rewards = _rewards(db, setup_profile.user_id)
    assert [(r.type, r.points) for r in rewards] == [("boost", -9)]


def test_last_activity_date_non_decreasing(db, setup_profile, today):
    svc = RewardService(db)
    dates = [today, today - timedelta(days=3), today + timedelta(days=1), today]
    seen = []
    for d in dates:
        svc.accrue(setup_profile.user_id, is_boost=False, today=d)
        db.refresh(setup_profile)
        seen.append(setup_profile.last_activity_date)
    assert seen == sorted(seen)


def test_ledger_reconstructs_total(db, setup_profile, today):
    svc = RewardService(db)
    for offset in range(5):
        svc.accrue(setup_profile.user_id, is_boost=offset == 3, today=today + timedelta(days=offset))
    db.refresh(setup_profile)
    assert svc.get_ledger_total(setup_profile.user_id) == setup_profile.total_points


def test_get_rewards_query_scoped_to_user(db, setup_profile, setup_other_profile, today):
    svc = RewardService(db)
    svc.accrue(setup_profile.user_id, is_boost=False, today=today)
    svc.accrue(setup_other_profile.user_id, is_boost=False, today=today)
    rewards = db.execute(svc.get_rewards_query(setup_profile.user_id)).scalars().all()
    assert len(rewards) == 1
    assert rewards[0].user_id == setup_profile.user_id
