"""
Service: CRUD operations on users.

Input: UserCommand / ListUsersQuery DTOs, user ids.
Output: User entities.
Side effects: Writes through the UserRepository port.
Failure cases: UserValidationError, UserNotFoundError,
ConstraintViolationError (propagated from storage).
"""

import logging
from dataclasses import asdict, replace
from datetime import date
from typing import Callable

from app.application.users.dtos import ListUsersQuery, UserCommand
from app.domain.users.entities import User
from app.domain.users.errors import UserNotFoundError
from app.domain.users.ports import UserRepository
from app.domain.users.rules import (
    check_date_range,
    check_minimum_age,
    check_user_fields,
)

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user creation, lookup, update, deletion and listing.

    Business rules (minimum age, date range sanity, field shapes) are
    checked here; persistence is delegated to the UserRepository port.
    """

    def __init__(
        self,
        repository: UserRepository,
        min_age: int,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Storage port for users.
            min_age: Minimum age in years required to register.
            today: Clock returning the current date.
        """
        self._repository = repository
        self._min_age = min_age
        self._today = today

    def create(self, command: UserCommand) -> User:
        """Register a new user.

        Raises:
            UserValidationError: If the user is younger than the minimum age
                or a field has an invalid shape.
            ConstraintViolationError: If storage rejects the record.
        """
        if command.birth_date is not None:
            check_minimum_age(command.birth_date, self._today(), self._min_age)

        user = User(id=None, **asdict(command))
        check_user_fields(user)

        created = self._repository.insert(user)
        logger.info("Created user id=%s", created.id)
        return created

    def get_by_id(self, user_id: int) -> User:
        """Return the user with the given id.

        Raises:
            UserNotFoundError: If no such user exists.
        """
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def update(self, user_id: int, command: UserCommand) -> User:
        """Replace every field of an existing user, absent ones with None."""
        existing = self.get_by_id(user_id)

        updated = replace(existing, **asdict(command))
        check_user_fields(updated)

        saved = self._repository.update(updated)
        logger.info("Updated user id=%s", user_id)
        return saved

    def partial_update(self, user_id: int, command: UserCommand) -> User:
        """Overwrite only the fields that are set in the command."""
        existing = self.get_by_id(user_id)

        changes = {
            name: value for name, value in asdict(command).items() if value is not None
        }
        updated = replace(existing, **changes)
        check_user_fields(updated)

        saved = self._repository.update(updated)
        logger.info(
            "Partially updated user id=%s fields=%s", user_id, sorted(changes)
        )
        return saved

    def delete_by_id(self, user_id: int) -> None:
        """Delete a user.

        Raises:
            UserNotFoundError: If no such user exists.
        """
        if not self._repository.exists_by_id(user_id):
            raise UserNotFoundError(user_id)
        self._repository.delete_by_id(user_id)
        logger.info("Deleted user id=%s", user_id)

    def list_users(self, query: ListUsersQuery) -> list[User]:
        """Return a page of users, filtered by birth date when both bounds are set.

        Raises:
            UserValidationError: If the birth date range is invalid.
        """
        if query.date_from is None or query.date_to is None:
            return self._repository.list_page(query.offset, query.limit)

        check_date_range(query.date_from, query.date_to, self._today())
        return self._repository.list_page_by_birth_date_between(
            query.offset, query.limit, query.date_from, query.date_to
        )
