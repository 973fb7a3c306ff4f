"""
Domain-specific errors for the users bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserValidationError(UserDomainError):
    """Raised when input is semantically invalid (underage, bad date range)."""


class UserNotFoundError(UserDomainError):
    """Raised when a user with the given id does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class ConstraintViolationError(UserDomainError):
    """Raised by storage when a uniqueness or required-field constraint fails.

    The message carries the storage engine's own diagnostic text.
    """
