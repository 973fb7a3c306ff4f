"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

# Shared column width for every string attribute of a user.
MAX_FIELD_LENGTH = 100


@dataclass(frozen=True)
class User:
    """A registered user.

    ``id`` is None until the record has been inserted; storage assigns it.
    """

    id: Optional[int]
    email: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    birth_date: Optional[date]
    address: Optional[str] = None
    phone: Optional[str] = None
