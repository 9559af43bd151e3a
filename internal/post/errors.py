"""Module-specific errors for the post domain."""

from core.errors import ErrForbidden, ErrNotFound
from .constant import MSG_NOT_OWNER, MSG_POST_NOT_FOUND


class ErrPostNotFound(ErrNotFound):
    default_message = MSG_POST_NOT_FOUND


class ErrNotPostOwner(ErrForbidden):
    """Raised when the caller is authenticated but is not the post's creator."""

    default_message = MSG_NOT_OWNER


__all__ = [
    "ErrPostNotFound",
    "ErrNotPostOwner",
]
