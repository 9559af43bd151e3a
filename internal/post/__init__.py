"""Post domain: the post lifecycle manager."""

from .interface import IPostUseCase
from .type import (
    Config,
    ListPostsInput,
    CreatePostInput,
    UpdatePostInput,
    CreatorOutput,
    PostOutput,
    ListPostsOutput,
)
from .errors import ErrPostNotFound, ErrNotPostOwner
from .usecase.new import New as NewPostUseCase

__all__ = [
    # Interface
    "IPostUseCase",
    # Types
    "Config",
    "ListPostsInput",
    "CreatePostInput",
    "UpdatePostInput",
    "CreatorOutput",
    "PostOutput",
    "ListPostsOutput",
    # Errors
    "ErrPostNotFound",
    "ErrNotPostOwner",
    # Factory
    "NewPostUseCase",
]
