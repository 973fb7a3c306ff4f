"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire the infrastructure
adapter into the user service via constructor injection.
These are the composition root for the users context.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.application.users.user_service import UserService
from app.core.config import settings
from app.domain.users.ports import UserRepository
from app.infrastructure.users.user_repository import SqlAlchemyUserRepository


@lru_cache(maxsize=1)
def get_db_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return create_engine(settings.get_database_url(), pool_pre_ping=True)


def get_user_repository() -> UserRepository:
    """Build the user repository on top of the shared engine."""
    return SqlAlchemyUserRepository(engine=get_db_engine())


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Build UserService with its repository and the configured minimum age."""
    return UserService(repository=repository, min_age=settings.user_min_age)
