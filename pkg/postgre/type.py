from dataclasses import dataclass

from .constant import *


@dataclass
class PostgresConfig:
    """Configuration for PostgreSQL database.

    Attributes:
        database_url: PostgreSQL connection URL; plain URLs are upgraded to asyncpg
        pool_size: Connection pool size
        max_overflow: Max overflow connections
        pool_recycle: Recycle connections after N seconds
        pool_pre_ping: Verify connections before use
        echo: Log SQL statements
    """

    database_url: str
    pool_size: int = DEFAULT_POOL_SIZE
    max_overflow: int = DEFAULT_MAX_OVERFLOW
    pool_recycle: int = DEFAULT_POOL_RECYCLE
    pool_pre_ping: bool = DEFAULT_POOL_PRE_PING
    echo: bool = DEFAULT_ECHO

    def __post_init__(self):
        if not self.database_url:
            raise ValueError(ERROR_DATABASE_URL_EMPTY)
        if not self.database_url.startswith((ASYNC_DRIVER_PREFIX,) + SYNC_URL_PREFIXES):
            raise ValueError(ERROR_INVALID_DATABASE_URL)
        if self.pool_size <= 0:
            raise ValueError(ERROR_POOL_SIZE_POSITIVE)
        if self.max_overflow < 0:
            raise ValueError(ERROR_MAX_OVERFLOW_NON_NEGATIVE)
        if self.pool_recycle <= 0:
            raise ValueError(ERROR_POOL_RECYCLE_POSITIVE)

    def async_url(self) -> str:
        """Return the URL with the asyncpg driver selected."""
        for prefix in SYNC_URL_PREFIXES:
            if self.database_url.startswith(prefix):
                return ASYNC_DRIVER_PREFIX + self.database_url[len(prefix):]
        return self.database_url


__all__ = [
    "PostgresConfig",
]
