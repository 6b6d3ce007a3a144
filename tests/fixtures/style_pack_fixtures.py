"""Fixtures for style packs."""

import pytest

from app.models.style_pack import StylePack


@pytest.fixture(scope="function")
def setup_style_pack(db, faker):
    pack = StylePack(
        name="Pirate",
        description=faker.sentence(),
        system_prompt="You are a pirate. Answer like one.",
        cost=5,
        is_active=True,
    )
    db.add(pack)
    db.commit()
    db.refresh(pack)
    return pack


@pytest.fixture(scope="function")
def setup_inactive_style_pack(db, faker):
    pack = StylePack(
        name="Retired",
        description=faker.sentence(),
        system_prompt="You are retired.",
        cost=5,
        is_active=False,
    )
    db.add(pack)
    db.commit()
    db.refresh(pack)
    return pack
