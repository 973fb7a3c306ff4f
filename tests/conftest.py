"""
Shared pytest fixtures.

Storage runs on an in-memory SQLite database so no PostgreSQL
instance is needed. The clock is pinned to 2024-01-01.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.application.users.user_service import UserService  # noqa: E402
from app.infrastructure.users.tables import create_schema  # noqa: E402
from app.infrastructure.users.user_repository import (  # noqa: E402
    SqlAlchemyUserRepository,
)
from app.interfaces.users.dependencies import get_user_service  # noqa: E402
from app.main import app  # noqa: E402

EVALUATION_DATE = date(2024, 1, 1)
MIN_AGE = 18


@pytest.fixture
def engine():
    """Fresh in-memory database with the users table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(engine=engine)


@pytest.fixture
def service(repository) -> UserService:
    return UserService(
        repository=repository, min_age=MIN_AGE, today=lambda: EVALUATION_DATE
    )


@pytest.fixture
def client(service):
    """TestClient whose routes use the SQLite-backed service."""
    app.dependency_overrides[get_user_service] = lambda: service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
