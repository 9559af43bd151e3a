"""Error kinds shared by every domain.

Each kind carries the HTTP status and stable code the transport maps it to.
Domain packages subclass these (``ErrPostNotFound(ErrNotFound)``) so callers
can catch either the specific or the general kind.
"""

from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Base application error."""

    status_code = 500
    code = "INTERNAL"
    default_message = "Internal server error."

    def __init__(self, message: Optional[str] = None, data: Optional[List[Dict[str, Any]]] = None):
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "message": self.message,
            "status": self.status_code,
            "code": self.code,
        }
        if self.data is not None:
            body["data"] = self.data
        return body


class ErrValidationFailed(AppError):
    """Caller input malformed or too short. ``data`` lists per-field messages."""

    status_code = 422
    code = "VALIDATION_FAILED"
    default_message = "Validation failed."

    def __init__(self, errors: List[Any], message: Optional[str] = None):
        super().__init__(
            message,
            data=[e.to_dict() if hasattr(e, "to_dict") else e for e in errors],
        )


class ErrUnauthenticated(AppError):
    status_code = 401
    code = "UNAUTHENTICATED"
    default_message = "Not authenticated."


class ErrForbidden(AppError):
    status_code = 403
    code = "FORBIDDEN"
    default_message = "Not authorized."


class ErrNotFound(AppError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Resource not found."


class ErrConflict(AppError):
    status_code = 409
    code = "CONFLICT"
    default_message = "Resource already exists."


class ErrInternal(AppError):
    """Store-level failure after the check stage; no partial success implied."""

    pass


__all__ = [
    "AppError",
    "ErrValidationFailed",
    "ErrUnauthenticated",
    "ErrForbidden",
    "ErrNotFound",
    "ErrConflict",
    "ErrInternal",
]
