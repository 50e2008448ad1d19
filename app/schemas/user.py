"""Pydantic schemas for user records: public view, identifier, update and signup/signin payloads."""

import re
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    field_validator,
)

from app.core.security import (
    EMAIL_MAX_LEN,
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)

# Reusable role levels for validation and type safety across schemas.
Role = Literal["user", "admin"]

ROLE_VALUES: frozenset[str] = frozenset({"user", "admin"})

# Postgres INTEGER upper bound; larger ids can never exist in the store.
MAX_USER_ID = 2_147_483_647


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _normalize_email(value: str) -> str:
    """Lower-case the address and enforce the column length."""
    if len(value) > EMAIL_MAX_LEN:
        raise ValueError(f"email must be at most {EMAIL_MAX_LEN} characters")
    return value.lower()


Name = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN),
]
Email = Annotated[EmailStr, BeforeValidator(_strip), AfterValidator(_normalize_email)]


_DIGITS = re.compile(r"[0-9]+")


def _canonical_id(value: Any) -> Any:
    """Accept ints and plain digit strings only ("1_0", "+5", " 5", "5.0" are rejected)."""
    if isinstance(value, bool):
        raise ValueError("id must be a positive integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        return value
    raise ValueError("id must be a positive integer")


class UserIdParams(BaseModel):
    """Path identifier for /users/{id}; must be a positive integer."""

    id: Annotated[int, BeforeValidator(_canonical_id)] = Field(..., gt=0, le=MAX_USER_ID)


class UserPublic(BaseModel):
    """User record as returned by the API (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserUpdate(BaseModel):
    """
    Partial update: each field optional, absent fields left unchanged.

    Explicit nulls are rejected; use model_dump(exclude_unset=True) for the
    fields that were actually sent.
    """

    model_config = ConfigDict(extra="forbid")

    name: Name | None = None
    email: Email | None = None
    role: Role | None = None

    @field_validator("name", "email", "role", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("must not be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Only the fields present in the request."""
        return self.model_dump(exclude_unset=True)


class SignupRequest(BaseModel):
    """Registration payload. role defaults to 'user'."""

    name: Name
    email: Email
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Role = "user"


class SigninRequest(BaseModel):
    """Credentials for sign-in."""

    email: Email
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class UserResponse(BaseModel):
    """Envelope for single-user endpoints."""

    message: str
    user: UserPublic


class UsersListResponse(BaseModel):
    """Response for GET /users."""

    message: str
    users: list[UserPublic]
    count: int
