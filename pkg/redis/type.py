from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass
class RedisConfig:
    """Configuration for the Redis pub/sub client.

    Attributes:
        host: Redis host
        port: Redis port
        db: Redis database number
        password: Redis password (optional)
        username: Redis username (optional, Redis 6+)
        ssl: Enable SSL/TLS
        max_connections: Max connections in pool
        socket_connect_timeout: Socket connect timeout in seconds
        health_check_interval: Health check interval in seconds
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    db: int = DEFAULT_DB
    password: Optional[str] = None
    username: Optional[str] = None
    ssl: bool = DEFAULT_SSL
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    socket_connect_timeout: int = DEFAULT_SOCKET_CONNECT_TIMEOUT
    health_check_interval: int = DEFAULT_HEALTH_CHECK_INTERVAL

    def __post_init__(self):
        if not self.host:
            raise ValueError(ERROR_HOST_EMPTY)
        if self.port <= 0 or self.port > 65535:
            raise ValueError(ERROR_INVALID_PORT)
        if self.db < 0:
            raise ValueError(ERROR_INVALID_DB)
        if self.max_connections <= 0:
            raise ValueError(ERROR_INVALID_MAX_CONNECTIONS)


__all__ = [
    "RedisConfig",
]
