"""
Input validation for user identifiers and payloads.

Pure functions: no I/O, no store access. Every failure raises
app.core.errors.ValidationError carrying all field-level violations found
in one pass, formatted as [{"field": ..., "message": ...}].
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationError
from app.schemas.user import SigninRequest, SignupRequest, UserIdParams, UserUpdate

ModelT = TypeVar("ModelT", bound=BaseModel)

_VALUE_ERROR_PREFIX = "Value error, "


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into field/message pairs."""
    details: list[dict[str, str]] = []
    for err in errors:
        if err.get("type") == "json_invalid":
            details.append({"field": "body", "message": "Invalid JSON body"})
            continue
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        message = str(err.get("msg", "Invalid value"))
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        details.append({"field": ".".join(loc) or "body", "message": message})
    return details


def _validate(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(format_validation_errors(e.errors())) from e


def parse_user_id(raw: Any) -> int:
    """Parse a raw identifier (path segment) into a positive integer user id."""
    return _validate(UserIdParams, {"id": raw}).id


def validate_user_update(payload: Any) -> UserUpdate:
    """Validate a partial update. A missing body is treated as an empty update."""
    return _validate(UserUpdate, {} if payload is None else payload)


def validate_signup(payload: Any) -> SignupRequest:
    return _validate(SignupRequest, payload)


def validate_signin(payload: Any) -> SigninRequest:
    return _validate(SigninRequest, payload)
