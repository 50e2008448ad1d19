"""
Authorization policy for user mutation (update and delete).

Rules, evaluated in order:
  1. No identity                                   -> Unauthenticated
  2. Non-admin acting on another user's record     -> Forbidden
  3. Non-admin update that includes the role field -> Forbidden
  4. Otherwise                                     -> allow

The decision is pure; callers must evaluate it before touching the store.
"""

from enum import Enum
from typing import NamedTuple

from app.core.errors import Forbidden, ServiceError, Unauthenticated
from app.schemas.auth import Identity


class Operation(str, Enum):
    UPDATE = "update"
    DELETE = "delete"


class Decision(NamedTuple):
    """Outcome of the policy: allowed, or the error that denies the request."""

    allowed: bool
    denial: ServiceError | None = None


ALLOW = Decision(allowed=True)


def decide(
    identity: Identity | None,
    target_id: int,
    operation: Operation,
    role_change: bool = False,
) -> Decision:
    """Return the policy decision for `identity` performing `operation` on `target_id`."""
    if identity is None:
        return Decision(False, Unauthenticated("Authentication required"))
    if not identity.is_admin and identity.id != target_id:
        return Decision(False, Forbidden(f"You can only {operation.value} your own account"))
    if operation is Operation.UPDATE and role_change and not identity.is_admin:
        return Decision(False, Forbidden("Only admin users can change roles"))
    return ALLOW


def authorize(
    identity: Identity | None,
    target_id: int,
    operation: Operation,
    role_change: bool = False,
) -> None:
    """Raise the denial error unless the policy allows the request."""
    decision = decide(identity, target_id, operation, role_change=role_change)
    if not decision.allowed:
        raise decision.denial or Forbidden()
