"""
User request handlers: validate -> authorize -> store -> public fields.

Each function takes the store explicitly. Validation and authorization
failures are raised before any store call that could mutate data.
"""

import logging
from typing import Any

from app.core.errors import NotFound
from app.schemas.auth import Identity
from app.schemas.user import UserPublic
from app.services.authorization import Operation, authorize
from app.services.user_store import UserStore
from app.services.validation import parse_user_id, validate_user_update

logger = logging.getLogger(__name__)


def fetch_all_users(store: UserStore) -> list[UserPublic]:
    """Return every user with the credential stripped."""
    logger.info("Fetching all users")
    return [UserPublic.model_validate(u) for u in store.list_all()]


def get_user_by_id(store: UserStore, raw_id: Any) -> UserPublic:
    user_id = parse_user_id(raw_id)
    logger.info("Fetching user by id", extra={"user_id": user_id})
    user = store.find(id=user_id)
    if user is None:
        raise NotFound()
    return UserPublic.model_validate(user)


def update_user(
    store: UserStore,
    raw_id: Any,
    identity: Identity | None,
    payload: Any,
) -> UserPublic:
    """
    Apply a partial update to a user.

    Order: id and payload validation, authorization, existence check, write.
    An empty payload returns the current record without writing.
    """
    user_id = parse_user_id(raw_id)
    changes = validate_user_update(payload).changes()

    authorize(identity, user_id, Operation.UPDATE, role_change="role" in changes)

    existing = store.find(id=user_id)
    if existing is None:
        raise NotFound()
    if not changes:
        return UserPublic.model_validate(existing)

    logger.info(
        "Updating user",
        extra={
            "target_user_id": user_id,
            "user_id": identity.id if identity else None,
            "role_change": "role" in changes,
        },
    )
    updated = store.update(user_id, changes)
    if updated is None:
        # Removed between the existence check and the write.
        raise NotFound()
    logger.info("User %s updated", user_id)
    return UserPublic.model_validate(updated)


def delete_user(store: UserStore, raw_id: Any, identity: Identity | None) -> UserPublic:
    """Permanently remove a user; returns the removed record's public fields."""
    user_id = parse_user_id(raw_id)
    authorize(identity, user_id, Operation.DELETE)

    logger.info(
        "Deleting user",
        extra={"target_user_id": user_id, "user_id": identity.id if identity else None},
    )
    removed = store.delete(user_id)
    if removed is None:
        raise NotFound()
    logger.info("User %s deleted", user_id)
    return UserPublic.model_validate(removed)
