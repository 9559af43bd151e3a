"""Types for the auth domain."""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthContext:
    """Authentication result for one inbound operation. Never persisted."""

    user_id: Optional[uuid.UUID] = None
    is_authenticated: bool = False

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls(user_id=None, is_authenticated=False)

    @classmethod
    def authenticated(cls, user_id: uuid.UUID) -> "AuthContext":
        return cls(user_id=user_id, is_authenticated=True)


__all__ = ["AuthContext"]
