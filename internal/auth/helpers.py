import uuid

from core.errors import ErrUnauthenticated
from .type import AuthContext


def require_authenticated(auth: AuthContext) -> uuid.UUID:
    """Return the caller's id or raise ErrUnauthenticated.

    Every operation that needs a caller calls this first, before touching
    any store.
    """
    if auth is None or not auth.is_authenticated or auth.user_id is None:
        raise ErrUnauthenticated()
    return auth.user_id


__all__ = ["require_authenticated"]
