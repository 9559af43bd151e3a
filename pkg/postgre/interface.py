"""Interface for PostgreSQL database operations."""

from typing import AsyncContextManager, Protocol, runtime_checkable

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncSession


@runtime_checkable
class IDatabase(Protocol):
    """Protocol for database operations.

    Implementations are safe for concurrent use.
    """

    def get_session(self) -> AsyncContextManager[AsyncSession]:
        """Open a session that is rolled back on error and always closed."""
        ...

    async def create_schema(self, metadata: MetaData) -> None:
        """Create every table in metadata that does not exist yet."""
        ...

    async def health_check(self) -> bool:
        """Check database connectivity."""
        ...

    async def close(self) -> None:
        """Close database connections and cleanup resources."""
        ...


__all__ = ["IDatabase"]
