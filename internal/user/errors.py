"""Module-specific errors for the user domain."""

from core.errors import ErrConflict, ErrNotFound, ErrUnauthenticated

from .constant import MSG_EMAIL_EXISTS, MSG_INVALID_CREDENTIALS, MSG_USER_NOT_FOUND


class ErrUserNotFound(ErrNotFound):
    default_message = MSG_USER_NOT_FOUND


class ErrEmailExists(ErrConflict):
    default_message = MSG_EMAIL_EXISTS


class ErrInvalidCredentials(ErrUnauthenticated):
    """Unknown e-mail or wrong password. One message for both on purpose."""

    default_message = MSG_INVALID_CREDENTIALS


__all__ = [
    "ErrUserNotFound",
    "ErrEmailExists",
    "ErrInvalidCredentials",
]
