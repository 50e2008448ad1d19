"""Request dependencies: the user store and the caller's identity (get_current_identity)."""

import logging
from typing import Annotated

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.errors import Unauthenticated
from app.core.security import decode_access_token
from app.schemas.auth import Identity
from app.services.user_store import SqlAlchemyUserStore, UserStore

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    """Dependency: store bound to the request's DB session. Override in tests."""
    return SqlAlchemyUserStore(db)


def _request_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    """Bearer header wins over the auth cookie."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.AUTH_COOKIE_NAME) or None


def get_optional_identity(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> Identity | None:
    """
    Dependency: resolve the caller from a Bearer JWT or the auth cookie.

    Returns None when no token is sent, the token is invalid or expired, or
    the user no longer exists. The role comes from the store, not the token,
    so role changes apply immediately.
    """
    token = _request_token(request, credentials)
    if not token:
        return None
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError:
        logger.info("Ignoring invalid or expired token", extra={"path": request.url.path})
        return None
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        logger.info("Ignoring token with invalid subject", extra={"path": request.url.path})
        return None
    user = store.find(id=user_id)
    if user is None:
        return None
    return Identity(id=user.id, role=user.role)


def get_current_identity(
    identity: Annotated[Identity | None, Depends(get_optional_identity)],
) -> Identity:
    """Dependency: require an authenticated caller. Raises 401 otherwise."""
    if identity is None:
        raise Unauthenticated("Authentication required")
    return identity
