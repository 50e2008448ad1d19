"""Error taxonomy shared by services and rendered by the API exception handlers."""

from typing import Any


class ServiceError(Exception):
    """Base class for errors that map to a structured HTTP error response."""

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(
        self,
        message: str | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message or self.error
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Response body: always `error`; `message` when it adds information; `details` when present."""
        body: dict[str, Any] = {"error": self.error}
        if self.message != self.error:
            body["message"] = self.message
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(ServiceError):
    """Malformed input. `details` lists every field-level violation."""

    status_code = 400
    error = "Validation failed"

    def __init__(self, details: list[dict[str, Any]], message: str | None = None) -> None:
        super().__init__(message, details=details)


class Unauthenticated(ServiceError):
    status_code = 401
    error = "Unauthorized"


class Forbidden(ServiceError):
    status_code = 403
    error = "Forbidden"


class NotFound(ServiceError):
    status_code = 404
    error = "User not found"


class Conflict(ServiceError):
    status_code = 409
    error = "Conflict"


class InternalError(ServiceError):
    """Unexpected store or credential failure. The message is logged, never returned."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, message: str | None = None, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}
