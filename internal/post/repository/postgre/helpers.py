import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from ..errors import ErrInvalidData
from ..option import CreateOptions, UpdateOptions


def transform_to_new_post(opt: CreateOptions) -> Dict[str, Any]:
    if not opt.image_url:
        raise ErrInvalidData("image_url is required")
    if not opt.creator_id:
        raise ErrInvalidData("creator_id is required")

    now = datetime.now(timezone.utc)
    return {
        "id": uuid.uuid4(),
        "title": opt.title,
        "content": opt.content,
        "image_url": opt.image_url,
        "creator_id": opt.creator_id,
        "created_at": now,
        "updated_at": now,
    }


def transform_to_post_changes(opt: UpdateOptions) -> Dict[str, Any]:
    """Non-None fields plus a fresh updated_at. An empty image_url is never written."""
    changes: Dict[str, Any] = {}
    if opt.title is not None:
        changes["title"] = opt.title
    if opt.content is not None:
        changes["content"] = opt.content
    if opt.image_url:
        changes["image_url"] = opt.image_url
    changes["updated_at"] = datetime.now(timezone.utc)
    return changes


__all__ = [
    "transform_to_new_post",
    "transform_to_post_changes",
]
