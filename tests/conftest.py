"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-flashdeck-tests")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, get_db
from core.security import get_current_user_id
from main import app
from models.card import Card  # noqa: F401
from models.deck import Deck  # noqa: F401
from services.revalidation import PathRevalidator, get_revalidator

# One shared in-memory connection so the app and the test see the same tables
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

USER_A = "user_a"
USER_B = "user_b"


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def revalidator() -> PathRevalidator:
    """Revalidator without a webhook; it only records the stale paths."""
    return PathRevalidator()


@pytest.fixture
def current_user() -> dict[str, str | None]:
    return {"id": USER_A}


@pytest.fixture
def as_user(current_user: dict[str, str | None]) -> Callable[[str | None], None]:
    """Switch the identity the test client authenticates as."""

    def _switch(user_id: str | None) -> None:
        current_user["id"] = user_id

    return _switch


def _override_get_db(db_session: Session) -> Callable[[], Generator[Session, None, None]]:
    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    return override_get_db


@pytest.fixture
def client(
    db_session: Session,
    revalidator: PathRevalidator,
    current_user: dict[str, str | None],
) -> Generator[TestClient, Any, None]:
    """Test client authenticated as ``current_user`` with a recording revalidator."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    app.dependency_overrides[get_current_user_id] = lambda: current_user["id"]
    app.dependency_overrides[get_revalidator] = lambda: revalidator

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Test client that goes through real token verification."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
