"""
Pydantic schemas for users API request/response validation.

These schemas check request shapes and define the API contract.
JSON field names are camelCase; snake_case is accepted on input too.
No business logic belongs here.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from app.application.users.dtos import UserCommand
from app.domain.users.entities import MAX_FIELD_LENGTH, User


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserRequest(CamelModel):
    """Request schema for create, full update and partial update.

    Every field is optional here. Whether a missing field is an error
    (create), is written as null (PUT) or is left untouched (PATCH)
    is decided by the service and the storage constraints.
    """

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH)
    last_name: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH)
    birth_date: date | None = Field(
        default=None, description="Date of birth, YYYY-MM-DD"
    )
    address: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH)
    phone: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH)

    def to_command(self) -> UserCommand:
        return UserCommand(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            birth_date=self.birth_date,
            address=self.address,
            phone=self.phone,
        )


class UserResponse(CamelModel):
    """Response schema for a stored user."""

    id: int
    email: str
    first_name: str
    last_name: str
    birth_date: date
    address: str | None = None
    phone: str | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            birth_date=user.birth_date,
            address=user.address,
            phone=user.phone,
        )


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
