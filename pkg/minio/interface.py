"""Interface for image blob storage."""

from typing import Protocol, runtime_checkable

from .type import StoredObject


@runtime_checkable
class IBlobStore(Protocol):
    """Protocol for image storage.

    Implementations are safe for concurrent use.
    """

    async def store(self, data: bytes, content_type: str, filename: str) -> str:
        """Store an image and return its public path ('images/<name>')."""
        ...

    async def remove(self, path: str) -> None:
        """Remove an image. Best effort: failures are logged, never raised."""
        ...

    async def open(self, path: str) -> StoredObject:
        """Read an image back."""
        ...


__all__ = ["IBlobStore"]
