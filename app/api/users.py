"""User CRUD endpoints. Identifiers are taken raw and validated by the user services."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from app.api.deps import get_current_identity, get_optional_identity, get_user_store
from app.schemas.auth import Identity
from app.schemas.user import UserResponse, UsersListResponse
from app.services import users as user_service
from app.services.user_store import UserStore

router = APIRouter()


@router.get("", response_model=UsersListResponse)
def list_users(
    _identity: Annotated[Identity, Depends(get_current_identity)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UsersListResponse:
    """List all users (any authenticated caller)."""
    users = user_service.fetch_all_users(store)
    return UsersListResponse(message="Users fetched successfully", users=users, count=len(users))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    _identity: Annotated[Identity, Depends(get_current_identity)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UserResponse:
    user = user_service.get_user_by_id(store, user_id)
    return UserResponse(message="User fetched successfully", user=user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    identity: Annotated[Identity | None, Depends(get_optional_identity)],
    store: Annotated[UserStore, Depends(get_user_store)],
    payload: Annotated[Any, Body()] = None,
) -> UserResponse:
    """
    Partial update of name, email and role.

    Non-admin callers may only update their own record and may not change
    roles. Validation errors are reported before authentication errors.
    """
    user = user_service.update_user(store, user_id, identity, payload)
    return UserResponse(message="User updated successfully", user=user)


@router.delete("/{user_id}", response_model=UserResponse)
def delete_user(
    user_id: str,
    identity: Annotated[Identity | None, Depends(get_optional_identity)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UserResponse:
    """Permanently delete a user (self, or any user for admins)."""
    user = user_service.delete_user(store, user_id, identity)
    return UserResponse(message="User deleted successfully", user=user)
