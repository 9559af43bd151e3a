from typing import AsyncIterator

import redis.asyncio as aioredis
from loguru import logger
from redis.asyncio import ConnectionPool

from .constant import *
from .interface import IPubSub
from .type import RedisConfig


class RedisPubSub(IPubSub):
    """Redis pub/sub client with async support.

    Example:
        >>> bus = RedisPubSub(RedisConfig(host="localhost"))
        >>> await bus.publish("feed.posts", '{"action": "create"}')
        >>> async for message in bus.listen("feed.posts"):
        ...     print(message)
    """

    def __init__(self, config: RedisConfig):
        self.config = config
        self.client = None
        self.pool = None
        self._initialize_client()

    def _initialize_client(self) -> None:
        try:
            pool_kwargs = {
                "host": self.config.host,
                "port": self.config.port,
                "db": self.config.db,
                "password": self.config.password,
                "username": self.config.username,
                "encoding": DEFAULT_ENCODING,
                "decode_responses": DEFAULT_DECODE_RESPONSES,
                "max_connections": self.config.max_connections,
                "socket_connect_timeout": self.config.socket_connect_timeout,
                "health_check_interval": self.config.health_check_interval,
            }

            if self.config.ssl:
                pool_kwargs["connection_class"] = aioredis.SSLConnection

            self.pool = ConnectionPool(**pool_kwargs)
            self.client = aioredis.Redis(connection_pool=self.pool)

            logger.info("Redis client initialized")

        except Exception as e:
            logger.error(f"Failed to initialize Redis client: {e}")
            raise

    async def publish(self, channel: str, message: str) -> int:
        if not channel:
            raise ValueError(ERROR_CHANNEL_EMPTY)
        return await self.client.publish(channel, message)

    async def listen(self, channel: str) -> AsyncIterator[str]:
        if not channel:
            raise ValueError(ERROR_CHANNEL_EMPTY)

        pubsub = self.client.pubsub(ignore_subscribe_messages=True)
        await pubsub.subscribe(channel)
        logger.info(f"Subscribed to Redis channel '{channel}'")
        try:
            async for message in pubsub.listen():
                if message.get("type") != "message":
                    continue
                yield message["data"]
        finally:
            await pubsub.unsubscribe(channel)
            await pubsub.aclose()
            logger.info(f"Unsubscribed from Redis channel '{channel}'")

    async def health_check(self) -> bool:
        try:
            return await self.client.ping()
        except Exception as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        if self.client:
            await self.client.aclose()
            logger.info("Redis connection closed")

        if self.pool:
            await self.pool.disconnect()
            logger.info("Redis connection pool closed")


__all__ = [
    "IPubSub",
    "RedisPubSub",
]
