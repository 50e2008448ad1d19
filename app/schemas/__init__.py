"""Pydantic request/response schemas."""

from app.schemas.auth import AuthResponse, Identity, MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.user import (
    Role,
    SigninRequest,
    SignupRequest,
    UserIdParams,
    UserPublic,
    UserResponse,
    UsersListResponse,
    UserUpdate,
)

__all__ = [
    "AuthResponse",
    "HealthResponse",
    "Identity",
    "MessageResponse",
    "Role",
    "SigninRequest",
    "SignupRequest",
    "UserIdParams",
    "UserPublic",
    "UserResponse",
    "UsersListResponse",
    "UserUpdate",
]
