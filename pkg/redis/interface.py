"""Interface for Redis pub/sub operations."""

from typing import AsyncIterator, Protocol, runtime_checkable


@runtime_checkable
class IPubSub(Protocol):
    """Protocol for channel based publish/subscribe.

    Implementations are safe for concurrent use.
    """

    async def publish(self, channel: str, message: str) -> int:
        """Publish a message; returns the number of receivers."""
        ...

    def listen(self, channel: str) -> AsyncIterator[str]:
        """Yield messages published on channel until cancelled."""
        ...

    async def health_check(self) -> bool:
        """Check Redis connectivity."""
        ...

    async def close(self) -> None:
        """Close Redis connection."""
        ...


__all__ = ["IPubSub"]
