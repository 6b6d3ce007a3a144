import os

os.environ["ENV"] = "test"

from datetime import datetime, timedelta, timezone  # noqa: E402
from uuid import UUID  # noqa: E402

import jwt  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import app.models  # noqa: E402,F401
from app.config import get_settings  # noqa: E402
from app.db import Base, SessionLocal, engine, get_db  # noqa: E402

pytest_plugins = [
    "tests.fixtures.profile_fixtures",
    "tests.fixtures.conversation_fixtures",
    "tests.fixtures.style_pack_fixtures",
]


def make_token(user_id: UUID, email: str = "user@example.com", **claims) -> str:
    """Sign a bearer token the way the identity provider does."""
    settings = get_settings()
    payload = {
        "sub": str(user_id),
        "email": email,
        "aud": settings.jwt_audience,
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        **claims,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm="HS256")


@pytest.fixture(scope="function")
def db():
    """Fresh schema per test on the shared in-memory engine."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def auth_headers(setup_profile):
    return {"Authorization": f"Bearer {make_token(setup_profile.user_id, setup_profile.email)}"}


@pytest.fixture(scope="function")
def app_with_db(db):
    from app.main import create_app

    app = create_app(testing=True)

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def anonymous_client(app_with_db):
    with TestClient(app_with_db) as c:
        yield c


@pytest.fixture(scope="function")
def client(app_with_db, auth_headers):
    """Client authenticated as setup_profile's user."""
    with TestClient(app_with_db, headers=auth_headers) as c:
        yield c
