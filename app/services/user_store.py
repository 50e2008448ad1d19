"""
User persistence: the store contract used by the services, and its SQLAlchemy implementation.

Services depend on the UserStore protocol only, so tests can pass an
in-memory implementation instead of a database session.
"""

import logging
from typing import Any, Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import Conflict, InternalError
from app.models import User

logger = logging.getLogger(__name__)

# Columns callers may write; id and timestamps are owned by the database.
WRITABLE_FIELDS = frozenset({"name", "email", "password", "role"})


class UserStore(Protocol):
    """Persistence operations over the User entity."""

    def find(self, *, id: int | None = None, email: str | None = None) -> User | None:
        """Return the user matching all given criteria, or None."""
        ...

    def list_all(self) -> list[User]:
        """Return every user ordered by id."""
        ...

    def insert(self, fields: dict[str, Any]) -> User:
        """Persist a new user; raises Conflict when the email is taken."""
        ...

    def update(self, user_id: int, fields: dict[str, Any]) -> User | None:
        """Apply fields to an existing user; None when the user does not exist."""
        ...

    def delete(self, user_id: int) -> User | None:
        """Remove a user permanently; returns the removed record or None."""
        ...


def _check_fields(fields: dict[str, Any]) -> None:
    unknown = set(fields) - WRITABLE_FIELDS
    if unknown:
        raise ValueError(f"Unknown user fields: {sorted(unknown)}")


def _snapshot(user: User) -> User:
    """Detached copy with every column loaded, safe to read after the row is gone."""
    return User(**{col.name: getattr(user, col.name) for col in User.__table__.columns})


class SqlAlchemyUserStore:
    """UserStore backed by a SQLAlchemy session (one per request)."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find(self, *, id: int | None = None, email: str | None = None) -> User | None:
        criteria: dict[str, Any] = {}
        if id is not None:
            criteria["id"] = id
        if email is not None:
            criteria["email"] = email
        if not criteria:
            raise ValueError("find() requires at least one criterion")
        try:
            return self.db.query(User).filter_by(**criteria).first()
        except SQLAlchemyError as e:
            raise InternalError("User lookup failed", cause=e) from e

    def list_all(self) -> list[User]:
        try:
            return self.db.query(User).order_by(User.id).all()
        except SQLAlchemyError as e:
            raise InternalError("User listing failed", cause=e) from e

    def insert(self, fields: dict[str, Any]) -> User:
        _check_fields(fields)
        user = User(**fields)
        self.db.add(user)
        self._commit("insert")
        self.db.refresh(user)
        return user

    def update(self, user_id: int, fields: dict[str, Any]) -> User | None:
        _check_fields(fields)
        user = self.db.get(User, user_id)
        if user is None:
            return None
        for key, value in fields.items():
            setattr(user, key, value)
        self._commit("update")
        self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> User | None:
        user = self.db.get(User, user_id)
        if user is None:
            return None
        removed = _snapshot(user)
        self.db.delete(user)
        self._commit("delete")
        return removed

    def _commit(self, operation: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("User %s violated a constraint", operation, extra={"operation": operation})
            raise Conflict("User with this email already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise InternalError(f"User {operation} failed", cause=e) from e
