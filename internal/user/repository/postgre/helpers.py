import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from internal.model.constant import DEFAULT_USER_STATUS
from ..errors import ErrInvalidData
from ..option import SaveOptions

_REQUIRED_ON_CREATE = ("email", "name", "password")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def transform_to_new_user(opt: SaveOptions) -> Dict[str, Any]:
    missing = [f for f in _REQUIRED_ON_CREATE if not getattr(opt, f)]
    if missing:
        raise ErrInvalidData(f"missing fields for new user: {', '.join(missing)}")

    now = datetime.now(timezone.utc)
    return {
        "id": opt.id or uuid.uuid4(),
        "email": normalize_email(opt.email),
        "name": opt.name,
        "password": opt.password,
        "status": opt.status if opt.status is not None else DEFAULT_USER_STATUS,
        "created_at": now,
        "updated_at": now,
    }


def transform_to_user_changes(opt: SaveOptions) -> Dict[str, Any]:
    changes: Dict[str, Any] = {
        k: v
        for k, v in (
            ("email", opt.email),
            ("name", opt.name),
            ("password", opt.password),
            ("status", opt.status),
        )
        if v is not None
    }
    if "email" in changes:
        changes["email"] = normalize_email(changes["email"])
    changes["updated_at"] = datetime.now(timezone.utc)
    return changes


__all__ = [
    "normalize_email",
    "transform_to_new_user",
    "transform_to_user_changes",
]
