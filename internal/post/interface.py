"""Interface for the post lifecycle use case.

Every operation takes the caller's AuthContext and rejects anonymous
callers before touching any store.
"""

from typing import Protocol, runtime_checkable

from internal.auth.type import AuthContext
from .type import CreatePostInput, ListPostsInput, ListPostsOutput, PostOutput, UpdatePostInput


@runtime_checkable
class IPostUseCase(Protocol):
    # Reads
    async def list(self, auth: AuthContext, input_data: ListPostsInput) -> ListPostsOutput:
        ...

    async def get(self, auth: AuthContext, post_id: str) -> PostOutput:
        ...

    # Mutations
    async def create(self, auth: AuthContext, input_data: CreatePostInput) -> PostOutput:
        ...

    async def update(self, auth: AuthContext, post_id: str, input_data: UpdatePostInput) -> PostOutput:
        ...

    async def delete(self, auth: AuthContext, post_id: str) -> None:
        ...

    # Lifecycle
    async def close(self) -> None:
        """Wait for pending background image removals."""
        ...


__all__ = ["IPostUseCase"]
