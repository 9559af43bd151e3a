"""Options structs for post repository operations.

Convention: UseCase passes Options -> Repository builds query from Options.
"""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateOptions:
    title: str
    content: str
    image_url: str
    creator_id: uuid.UUID


@dataclass
class UpdateOptions:
    """Fields left as None keep their stored value."""

    id: uuid.UUID
    title: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None


@dataclass
class ListOptions:
    offset: int = 0
    limit: int = 2


__all__ = [
    "CreateOptions",
    "UpdateOptions",
    "ListOptions",
]
