import datetime
import os
from typing import Generator

# Settings are read at import time: configure before importing the app.
os.environ.setdefault("SECRET_KEY", "test_secret_key_for_testing_only")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.api.dependencies import get_today
from app.core.ratelimit import RateLimiter
from app.core.security import create_access_token
from app.db.session import get_db
from app.main import app as fastapi_app

# Wednesday, day 71 of 2025
TODAY = datetime.date(2025, 3, 12)


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine) -> Generator[TestClient, None, None]:
    """Test client with the database and "today" pinned."""

    def override_get_db():
        with Session(engine) as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_today] = lambda: TODAY
    fastapi_app.state.rate_limiter = RateLimiter(max_requests=1000, window_seconds=60)

    yield TestClient(fastapi_app)

    fastapi_app.dependency_overrides.clear()


def make_auth_headers(email: str, name: str = None) -> dict:
    claims = {"sub": email}
    if name:
        claims["name"] = name
    return {"Authorization": f"Bearer {create_access_token(claims)}"}


@pytest.fixture
def auth_headers() -> dict:
    return make_auth_headers("alice@example.com", "Alice")


@pytest.fixture
def headers_for():
    """Factory: bearer headers for any email."""
    return make_auth_headers


@pytest.fixture
def today() -> datetime.date:
    return TODAY
