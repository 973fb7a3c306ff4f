"""
Adapter: User repository.

Implements UserRepository port.
Responsible for persisting and retrieving users with SQLAlchemy Core.
"""

import logging
from datetime import date
from typing import Optional

from sqlalchemy import delete, exists, insert, select, update
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError

from app.domain.users.entities import User
from app.domain.users.errors import ConstraintViolationError
from app.domain.users.ports import UserRepository
from app.infrastructure.users.tables import users_table

logger = logging.getLogger(__name__)


def _to_user(row: Row) -> User:
    return User(
        id=row.id,
        email=row.email,
        first_name=row.first_name,
        last_name=row.last_name,
        birth_date=row.birth_date,
        address=row.address,
        phone=row.phone,
    )


def _to_values(user: User) -> dict:
    return {
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "birth_date": user.birth_date,
        "address": user.address,
        "phone": user.phone,
    }


def _constraint_violation(exc: IntegrityError) -> ConstraintViolationError:
    """Wrap a driver integrity error, keeping the driver's own message."""
    root_cause = str(exc.orig).strip() if exc.orig is not None else str(exc)
    logger.warning("Constraint violation: %s", root_cause)
    return ConstraintViolationError(root_cause)


class SqlAlchemyUserRepository(UserRepository):
    """Stores users in the ``users`` table.

    Each call runs in its own transaction.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def insert(self, user: User) -> User:
        """Insert a user and return it with the id assigned by the database.

        Args:
            user: User entity without an id.

        Returns:
            The stored user.

        Raises:
            ConstraintViolationError: On duplicate email or missing column.
        """
        try:
            with self._engine.begin() as conn:
                result = conn.execute(insert(users_table).values(**_to_values(user)))
                user_id = result.inserted_primary_key[0]
        except IntegrityError as exc:
            raise _constraint_violation(exc) from exc

        return User(id=user_id, **_to_values(user))

    def get_by_id(self, user_id: int) -> Optional[User]:
        query = select(users_table).where(users_table.c.id == user_id)
        with self._engine.connect() as conn:
            row = conn.execute(query).first()
        return _to_user(row) if row is not None else None

    def exists_by_id(self, user_id: int) -> bool:
        query = select(exists().where(users_table.c.id == user_id))
        with self._engine.connect() as conn:
            return bool(conn.execute(query).scalar())

    def update(self, user: User) -> User:
        """Overwrite all columns of the row with ``user.id``.

        Raises:
            ConstraintViolationError: On duplicate email or nulled column.
        """
        statement = (
            update(users_table)
            .where(users_table.c.id == user.id)
            .values(**_to_values(user))
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(statement)
        except IntegrityError as exc:
            raise _constraint_violation(exc) from exc
        return user

    def delete_by_id(self, user_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(users_table).where(users_table.c.id == user_id))

    def list_page(self, offset: int, limit: int) -> list[User]:
        query = (
            select(users_table)
            .order_by(users_table.c.id)
            .offset(offset)
            .limit(limit)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_to_user(row) for row in rows]

    def list_page_by_birth_date_between(
        self, offset: int, limit: int, date_from: date, date_to: date
    ) -> list[User]:
        query = (
            select(users_table)
            .where(users_table.c.birth_date.between(date_from, date_to))
            .order_by(users_table.c.id)
            .offset(offset)
            .limit(limit)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()

        logger.debug(
            "Fetched %d users born between %s and %s", len(rows), date_from, date_to
        )
        return [_to_user(row) for row in rows]
