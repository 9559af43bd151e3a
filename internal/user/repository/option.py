import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class SaveOptions:
    """Create (no id, or unknown id) or update (known id) a user.

    On update only the fields that are not None are written.
    """

    id: Optional[uuid.UUID] = None
    email: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None
    status: Optional[str] = None


@dataclass
class GetOneOptions:
    id: Optional[uuid.UUID] = None
    email: Optional[str] = None


@dataclass
class OwnedPostOptions:
    user_id: uuid.UUID
    post_id: uuid.UUID


__all__ = [
    "SaveOptions",
    "GetOneOptions",
    "OwnedPostOptions",
]
