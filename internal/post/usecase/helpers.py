"""Shared pieces of the post use case: validation, per-post locks,
background blob removal and presenters."""

import asyncio
import uuid
import weakref
from typing import List, Optional, Set

from core.validation import FieldError, check_min_length, check_required, is_empty, parse_uuid
from internal.model import Post, User
from ..constant import (
    CONTENT_MIN_LENGTH,
    MSG_CONTENT_INVALID,
    MSG_NO_IMAGE,
    MSG_TITLE_INVALID,
    TITLE_MIN_LENGTH,
)
from ..errors import ErrPostNotFound
from ..type import CreatorOutput, PostOutput


def validate_post_fields(title: Optional[str], content: Optional[str]) -> List[FieldError]:
    """Collect every title/content violation; nothing short-circuits."""
    errors: List[FieldError] = []
    check_min_length(errors, "title", (title or "").strip(), TITLE_MIN_LENGTH, MSG_TITLE_INVALID)
    check_min_length(errors, "content", (content or "").strip(), CONTENT_MIN_LENGTH, MSG_CONTENT_INVALID)
    return errors


def validate_image(errors: List[FieldError], image_url: Optional[str]) -> None:
    check_required(errors, "image", (image_url or "").strip(), MSG_NO_IMAGE)


def parse_post_id(post_id: str) -> uuid.UUID:
    """A malformed id cannot name an existing post."""
    parsed = parse_uuid(post_id)
    if parsed is None:
        raise ErrPostNotFound()
    return parsed


def normalize_image(image_url: Optional[str]) -> Optional[str]:
    """Blank means no new image."""
    if is_empty(image_url) or not image_url.strip():
        return None
    return image_url.strip()


def to_post_output(post: Post, creator: Optional[User] = None) -> PostOutput:
    """Render a post; creator overrides the loaded relationship when given."""
    creator = creator if creator is not None else post.creator
    return PostOutput(
        id=str(post.id),
        title=post.title,
        content=post.content,
        image_url=post.image_url,
        creator=CreatorOutput(
            id=str(post.creator_id),
            name=creator.name if creator is not None else "",
        ),
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


class PostLocks:
    """One asyncio.Lock per post id, alive while anyone holds a reference."""

    def __init__(self):
        self._locks: "weakref.WeakValueDictionary[uuid.UUID, asyncio.Lock]" = weakref.WeakValueDictionary()

    def get(self, post_id: uuid.UUID) -> asyncio.Lock:
        lock = self._locks.get(post_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[post_id] = lock
        return lock

    def __len__(self) -> int:
        return len(self._locks)


class BackgroundTasks:
    """Fire-and-forget coroutines that can still be drained on shutdown."""

    def __init__(self):
        self._tasks: Set[asyncio.Task] = set()

    def spawn(self, coro, name: Optional[str] = None) -> asyncio.Task:
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


__all__ = [
    "validate_post_fields",
    "validate_image",
    "parse_post_id",
    "normalize_image",
    "to_post_output",
    "PostLocks",
    "BackgroundTasks",
]
