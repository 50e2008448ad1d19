"""Credential service: account registration and sign-in over the user store."""

import logging
from typing import Any

from app.core.errors import Conflict, Unauthenticated
from app.core.security import hash_password, verify_password
from app.schemas.user import UserPublic
from app.services.user_store import UserStore
from app.services.validation import validate_signin, validate_signup

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def signup(store: UserStore, payload: Any) -> UserPublic:
    """
    Register a new account and return its public fields.

    Raises ValidationError for a malformed payload and Conflict when the
    email is already registered. Only the bcrypt hash is persisted.
    """
    data = validate_signup(payload)
    if store.find(email=data.email) is not None:
        logger.warning("Signup rejected: email already registered", extra={"email": data.email})
        raise Conflict("User with this email already exists")

    user = store.insert(
        {
            "name": data.name,
            "email": data.email,
            "password": hash_password(data.password),
            "role": data.role,
        }
    )
    logger.info("User %s created with ID: %s", user.name, user.id, extra={"role": user.role})
    return UserPublic.model_validate(user)


def signin(store: UserStore, payload: Any) -> UserPublic:
    """
    Check email and password; return the matching account's public fields.

    Unknown email and wrong password both raise Unauthenticated with the
    same message.
    """
    data = validate_signin(payload)
    user = store.find(email=data.email)
    if user is None or not verify_password(data.password, user.password):
        logger.warning("Signin failed", extra={"email": data.email})
        raise Unauthenticated(INVALID_CREDENTIALS)
    logger.info("User signed in", extra={"user_id": user.id})
    return UserPublic.model_validate(user)
