"""Types for the post domain."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .constant import DEFAULT_PER_PAGE


@dataclass
class Config:
    """Post lifecycle configuration, handed to the use case at construction."""

    per_page: int = DEFAULT_PER_PAGE

    def __post_init__(self):
        if self.per_page <= 0:
            raise ValueError("per_page must be positive")


@dataclass
class ListPostsInput:
    page: Optional[int] = None


@dataclass
class CreatePostInput:
    title: str
    content: str
    image_url: Optional[str] = None


@dataclass
class UpdatePostInput:
    """image_url=None keeps the stored image."""

    title: str
    content: str
    image_url: Optional[str] = None


@dataclass
class CreatorOutput:
    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"_id": self.id, "name": self.name}


@dataclass
class PostOutput:
    id: str
    title: str
    content: str
    image_url: str
    creator: CreatorOutput
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "title": self.title,
            "content": self.content,
            "imageUrl": self.image_url,
            "creator": self.creator.to_dict(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


@dataclass
class ListPostsOutput:
    posts: List[PostOutput] = field(default_factory=list)
    total_posts: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "posts": [p.to_dict() for p in self.posts],
            "totalItems": self.total_posts,
        }


__all__ = [
    "Config",
    "ListPostsInput",
    "CreatePostInput",
    "UpdatePostInput",
    "CreatorOutput",
    "PostOutput",
    "ListPostsOutput",
]
