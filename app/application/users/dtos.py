"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class UserCommand:
    """Input DTO for creating or updating a user.

    Every field is optional. A full update writes absent fields as None;
    a partial update leaves them untouched.

    Attributes:
        email: Contact email, unique across users.
        first_name: Given name.
        last_name: Family name.
        birth_date: Date of birth.
        address: Postal address.
        phone: Phone number.
    """

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    address: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class ListUsersQuery:
    """Input DTO for listing a page of users.

    Attributes:
        offset: Number of users to skip.
        limit: Maximum number of users to return.
        date_from: Earliest birth date (inclusive), optional.
        date_to: Latest birth date (inclusive), optional.
    """

    offset: int = 0
    limit: int = 10
    date_from: date | None = None
    date_to: date | None = None
