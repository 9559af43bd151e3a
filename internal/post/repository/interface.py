import uuid
from typing import List, Optional, Protocol, runtime_checkable

from internal.model import Post
from .option import CreateOptions, ListOptions, UpdateOptions


@runtime_checkable
class IPostRepository(Protocol):
    """Posts returned by every method have ``creator`` loaded."""

    # Writes
    async def create(self, opt: CreateOptions) -> Post: ...
    async def update(self, opt: UpdateOptions) -> Optional[Post]: ...
    async def delete(self, id: uuid.UUID) -> bool: ...

    # Reads
    async def detail(self, id: uuid.UUID) -> Optional[Post]: ...
    async def list(self, opt: ListOptions) -> List[Post]: ...
    async def count(self) -> int: ...


__all__ = ["IPostRepository"]
