"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from app.domain.users.entities import User


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def insert(self, user: User) -> User:
        """Persist a new user and return it with its assigned id.

        Raises:
            ConstraintViolationError: If the email is already taken or a
                required field is missing.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return a user by its id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, user_id: int) -> bool:
        """Return True if a user with the given id exists."""
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> User:
        """Overwrite the stored record that has ``user.id``.

        Raises:
            ConstraintViolationError: Same conditions as ``insert``.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, user_id: int) -> None:
        """Delete a user. Callers check existence first."""
        raise NotImplementedError

    @abstractmethod
    def list_page(self, offset: int, limit: int) -> list[User]:
        """Return at most ``limit`` users ordered by id, skipping ``offset``."""
        raise NotImplementedError

    @abstractmethod
    def list_page_by_birth_date_between(
        self, offset: int, limit: int, date_from: date, date_to: date
    ) -> list[User]:
        """Return a page of users born within ``[date_from, date_to]``.

        Args:
            offset: Number of matching rows to skip.
            limit: Maximum number of rows to return.
            date_from: Earliest birth date (inclusive).
            date_to: Latest birth date (inclusive).

        Returns:
            List of users ordered by id ascending.
        """
        raise NotImplementedError
