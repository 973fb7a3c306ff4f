"""
SQLAlchemy table definitions for the users bounded context.
"""

import logging

from sqlalchemy import Column, Date, Integer, MetaData, String, Table
from sqlalchemy.engine import Engine

from app.domain.users.entities import MAX_FIELD_LENGTH

logger = logging.getLogger(__name__)

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(MAX_FIELD_LENGTH), nullable=False, unique=True),
    Column("first_name", String(MAX_FIELD_LENGTH), nullable=False),
    Column("last_name", String(MAX_FIELD_LENGTH), nullable=False),
    Column("birth_date", Date, nullable=False),
    Column("address", String(MAX_FIELD_LENGTH)),
    Column("phone", String(MAX_FIELD_LENGTH)),
)


def create_schema(engine: Engine) -> None:
    """Create the users table if it does not exist yet."""
    metadata.create_all(engine)
    logger.info("Database schema ready (%s)", engine.url.render_as_string())
