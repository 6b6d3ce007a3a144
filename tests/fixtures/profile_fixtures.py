"""Fixtures for profile model."""

import uuid
from datetime import date, timedelta

import pytest

from app.models.profile import Profile


def _make_profile(db, faker, **overrides) -> Profile:
    email = faker.email()
    values = dict(
        user_id=uuid.uuid4(),
        email=email,
        display_name=email.split("@")[0],
        total_points=0,
        current_streak=0,
        last_activity_date=None,
    )
    values.update(overrides)
    profile = Profile(**values)
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


@pytest.fixture(scope="function")
def today():
    return date(2026, 10, 18)


@pytest.fixture(scope="function")
def setup_profile(db, faker):
    """A brand-new profile with no activity."""
    return _make_profile(db, faker)


@pytest.fixture(scope="function")
def setup_other_profile(db, faker):
    """A second user, for ownership checks."""
    return _make_profile(db, faker)


@pytest.fixture(scope="function")
def setup_active_profile(db, faker, today):
    """Profile with a 3-day streak whose last activity was yesterday."""
    return _make_profile(
        db,
        faker,
        total_points=25,
        current_streak=3,
        last_activity_date=today - timedelta(days=1),
    )
