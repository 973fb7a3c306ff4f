"""
Validation rules for the users bounded context.

Plain functions, each raising UserValidationError when a rule is broken.
The service calls them before touching storage.
No framework imports. No IO.
"""

import re
from datetime import date
from typing import Optional

from app.domain.users.entities import MAX_FIELD_LENGTH, User
from app.domain.users.errors import UserValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")

INVALID_DATE_RANGE = "Invalid date range"


def minimum_birth_date(today: date, min_age: int) -> date:
    """Return the latest birth date of someone who is ``min_age`` today.

    A 29 February that does not exist in the target year becomes 28 February.
    """
    try:
        return today.replace(year=today.year - min_age)
    except ValueError:
        return today.replace(year=today.year - min_age, day=28)


def check_minimum_age(birth_date: date, today: date, min_age: int) -> None:
    """Reject birth dates later than ``today`` minus ``min_age`` years."""
    if birth_date > minimum_birth_date(today, min_age):
        raise UserValidationError(f"User should be at least {min_age} years old")


def check_date_range(date_from: date, date_to: date, today: date) -> None:
    """Reject ranges that are reversed or do not span ``today``.

    A valid range satisfies ``date_from <= date_to``, ``date_from <= today``
    and ``date_to >= today``.
    """
    if date_from > date_to or date_from > today or date_to < today:
        raise UserValidationError(INVALID_DATE_RANGE)


def check_user_fields(user: User) -> None:
    """Check email shape and string lengths of a user about to be stored.

    Missing required fields are left to the storage constraints.
    """
    if user.email is not None and not EMAIL_PATTERN.match(user.email):
        raise UserValidationError(f"Invalid email: {user.email}")

    text_fields: dict[str, Optional[str]] = {
        "email": user.email,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "address": user.address,
        "phone": user.phone,
    }
    for name, value in text_fields.items():
        if value is not None and len(value) > MAX_FIELD_LENGTH:
            raise UserValidationError(
                f"{name} must be at most {MAX_FIELD_LENGTH} characters"
            )
