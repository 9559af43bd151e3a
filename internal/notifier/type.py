"""Types for the change notifier."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from internal.model.constant import NOTIFIER_CHANNEL
from .constant import DEFAULT_QUEUE_SIZE, FIELD_ACTION, FIELD_CHANNEL, FIELD_POST


class Action(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class LifecycleEvent:
    """A post creation, update or deletion. Broadcast, never persisted.

    ``post`` is the rendered post for create/update and the bare post id
    for delete.
    """

    action: Action
    post: Union[Dict[str, Any], str]

    @classmethod
    def created(cls, post: Dict[str, Any]) -> "LifecycleEvent":
        return cls(action=Action.CREATE, post=post)

    @classmethod
    def updated(cls, post: Dict[str, Any]) -> "LifecycleEvent":
        return cls(action=Action.UPDATE, post=post)

    @classmethod
    def deleted(cls, post_id: str) -> "LifecycleEvent":
        return cls(action=Action.DELETE, post=post_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            FIELD_CHANNEL: NOTIFIER_CHANNEL,
            FIELD_ACTION: self.action.value,
            FIELD_POST: self.post,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> "LifecycleEvent":
        """Raises ValueError on anything that is not a lifecycle envelope."""
        payload = json.loads(raw)
        if not isinstance(payload, dict):
            raise ValueError("event envelope must be an object")
        if FIELD_POST not in payload:
            raise ValueError("event envelope has no post")
        return cls(action=Action(payload.get(FIELD_ACTION)), post=payload[FIELD_POST])


@dataclass
class HubConfig:
    """queue_size bounds the events buffered for one slow subscriber."""

    queue_size: int = DEFAULT_QUEUE_SIZE

    def __post_init__(self):
        if self.queue_size <= 0:
            raise ValueError("queue_size must be positive")


__all__ = ["Action", "LifecycleEvent", "HubConfig"]
