from contextlib import asynccontextmanager
from typing import AsyncGenerator

from loguru import logger
from sqlalchemy import MetaData, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from .interface import IDatabase
from .type import PostgresConfig
from .constant import *


class PostgresDatabase(IDatabase):
    """PostgreSQL database manager with async support.

    Uses SQLAlchemy async with the asyncpg driver.
    """

    def __init__(self, config: PostgresConfig):
        self.config = config
        self.engine = None
        self.session_factory = None
        self._initialize_engine()

    def _initialize_engine(self) -> None:
        try:
            engine_kwargs = {
                "echo": self.config.echo,
                "pool_pre_ping": self.config.pool_pre_ping,
                "pool_recycle": self.config.pool_recycle,
            }

            # NullPool while echoing SQL so every statement gets a fresh connection in the log
            if self.config.echo:
                engine_kwargs["poolclass"] = NullPool
            else:
                engine_kwargs["pool_size"] = self.config.pool_size
                engine_kwargs["max_overflow"] = self.config.max_overflow

            self.engine = create_async_engine(self.config.async_url(), **engine_kwargs)

            self.session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
            )

            logger.info("PostgreSQL engine initialized")

        except Exception as e:
            logger.error(f"Failed to initialize PostgreSQL engine: {e}")
            raise

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get async database session with automatic cleanup.

        Raises:
            RuntimeError: If database not initialized
        """
        if not self.session_factory:
            raise RuntimeError(ERROR_DATABASE_NOT_INITIALIZED)

        async with self.session_factory() as session:
            try:
                yield session
            except Exception as e:
                logger.error(f"Database session error: {e}")
                await session.rollback()
                raise

    async def create_schema(self, metadata: MetaData) -> None:
        if not self.engine:
            raise RuntimeError(ERROR_DATABASE_NOT_INITIALIZED)

        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info(f"Database schema ensured ({len(metadata.tables)} tables)")

    async def health_check(self) -> bool:
        try:
            async with self.get_session() as session:
                result = await session.execute(text("SELECT 1"))
                return result.scalar() == 1
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
            logger.info("PostgreSQL engine closed")


__all__ = [
    "PostgresDatabase",
]
