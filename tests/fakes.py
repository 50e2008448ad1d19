"""In-memory UserStore for service and API tests."""

from datetime import datetime, timezone
from typing import Any

from app.core.errors import Conflict
from app.models import User
from app.services.user_store import WRITABLE_FIELDS


class InMemoryUserStore:
    """Dict-backed UserStore. Records every mutating call in `calls`."""

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.calls: list[tuple[str, int | None]] = []
        self._next_id = 1

    def add(
        self,
        name: str = "Test User",
        email: str = "user@example.com",
        password: str = "not-a-real-hash",
        role: str = "user",
    ) -> User:
        """Seed a user directly, bypassing `calls`."""
        now = datetime.now(timezone.utc)
        user = User(
            id=self._next_id,
            name=name,
            email=email,
            password=password,
            role=role,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        self._next_id += 1
        return user

    def find(self, *, id: int | None = None, email: str | None = None) -> User | None:
        for user in self.users.values():
            if id is not None and user.id != id:
                continue
            if email is not None and user.email != email:
                continue
            return user
        return None

    def list_all(self) -> list[User]:
        return [self.users[k] for k in sorted(self.users)]

    def insert(self, fields: dict[str, Any]) -> User:
        assert set(fields) <= WRITABLE_FIELDS
        if self.find(email=fields["email"]) is not None:
            raise Conflict("User with this email already exists")
        self.calls.append(("insert", None))
        return self.add(**fields)

    def update(self, user_id: int, fields: dict[str, Any]) -> User | None:
        assert set(fields) <= WRITABLE_FIELDS
        self.calls.append(("update", user_id))
        user = self.users.get(user_id)
        if user is None:
            return None
        if "email" in fields:
            other = self.find(email=fields["email"])
            if other is not None and other.id != user_id:
                raise Conflict("User with this email already exists")
        for key, value in fields.items():
            setattr(user, key, value)
        user.updated_at = datetime.now(timezone.utc)
        return user

    def delete(self, user_id: int) -> User | None:
        self.calls.append(("delete", user_id))
        return self.users.pop(user_id, None)
