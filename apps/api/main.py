from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI  # type: ignore

from pkg.logger.logger import Logger, LoggerConfig
from pkg.postgre.postgres import PostgresDatabase
from pkg.postgre.type import PostgresConfig
from pkg.redis.redis import RedisPubSub
from pkg.redis.type import RedisConfig as RedisPkgConfig
from pkg.minio.minio import MinioAdapter
from pkg.minio.type import MinIOConfig as MinioPkgConfig
from pkg.jwt.jwt import JWTManager
from pkg.jwt.type import JWTConfig
from pkg.bcrypt.bcrypt import BcryptHasher
from pkg.bcrypt.type import BcryptConfig
from config.config import load_config, Config
from internal.httpserver import Dependencies, build_app
from internal.model import Base
from internal.model.constant import (
    LOGGER_SERVICE_NAME,
    LOGGER_ENABLE_CONSOLE,
)
from internal.auth import NewAuthUseCase
from internal.notifier import Hub, HubConfig, RedisRelay
from internal.post import NewPostUseCase, Config as PostConfig
from internal.post.repository import New as NewPostRepository
from internal.user import NewUserUseCase
from internal.user.repository import New as NewUserRepository


async def init_dependencies(config: Config) -> Dependencies:
    """Initialize all service dependencies.

    Args:
        config: Application configuration

    Returns:
        Dependencies struct with all initialized instances
    """
    closers = []

    # Initialize logger
    logger = Logger(
        LoggerConfig(
            level=config.logging.level,
            enable_console=LOGGER_ENABLE_CONSOLE,
            colorize=config.logging.colorize,
            service_name=config.server.service_name or LOGGER_SERVICE_NAME,
        )
    )
    logger.info("Logger initialized")

    # Initialize PostgreSQL database
    db = PostgresDatabase(
        PostgresConfig(
            database_url=config.database.url,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow,
            echo=config.database.echo,
        )
    )
    if not await db.health_check():
        raise RuntimeError("PostgreSQL health check failed")
    if config.database.create_schema:
        await db.create_schema(Base.metadata)
    closers.append(db.close)
    logger.info("PostgreSQL connection verified")

    # Initialize MinIO
    blob_store = MinioAdapter(
        MinioPkgConfig(
            endpoint=config.minio.endpoint,
            access_key=config.minio.access_key,
            secret_key=config.minio.secret_key,
            bucket=config.minio.bucket,
            secure=config.minio.secure,
        )
    )
    await blob_store.setup()
    logger.info("MinIO storage initialized")

    # Initialize notifier, bridged through Redis when enabled
    hub = Hub(HubConfig(queue_size=config.feed.notifier_queue_size), logger=logger)
    notifier = hub
    health_checks = {"database": db.health_check}

    if config.redis.enabled:
        pubsub = RedisPubSub(
            RedisPkgConfig(
                host=config.redis.host,
                port=config.redis.port,
                db=config.redis.db,
                password=config.redis.password,
            )
        )
        if not await pubsub.health_check():
            raise RuntimeError("Redis health check failed")
        relay = RedisRelay(hub, pubsub, channel=config.redis.channel, logger=logger)
        relay.start()
        notifier = relay
        health_checks["redis"] = pubsub.health_check
        closers.append(pubsub.close)
        closers.append(relay.close)
        logger.info("Redis relay started")

    # Initialize security primitives
    token_service = JWTManager(
        JWTConfig(
            secret=config.auth.jwt_secret,
            algorithm=config.auth.jwt_algorithm,
            expires_in=config.auth.token_ttl,
        )
    )
    hasher = BcryptHasher(BcryptConfig(rounds=config.auth.bcrypt_rounds))

    # Initialize domains
    user_repository = NewUserRepository(db, logger)
    post_repository = NewPostRepository(db, logger)

    auth = NewAuthUseCase(token_service, logger)
    user = NewUserUseCase(user_repository, hasher, token_service, logger)
    post = NewPostUseCase(
        repository=post_repository,
        user_repository=user_repository,
        blob_store=blob_store,
        notifier=notifier,
        logger=logger,
        config=PostConfig(per_page=config.feed.per_page),
    )
    closers.append(post.close)
    logger.info("Use cases initialized")

    return Dependencies(
        logger=logger,
        auth=auth,
        user=user,
        post=post,
        blob_store=blob_store,
        hub=hub,
        health_checks=health_checks,
        closers=closers,
        service_name=config.server.service_name,
    )


async def shutdown_dependencies(deps: Dependencies) -> None:
    deps.logger.info("Cleaning up dependencies...")
    for close in reversed(deps.closers):
        try:
            await close()
        except Exception as e:
            deps.logger.error(f"Error during shutdown: {e}")


def create_app(config: Config) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        deps = await init_dependencies(config)
        app.state.deps = deps
        deps.logger.info("Feed API service started")
        try:
            yield
        finally:
            await shutdown_dependencies(deps)
            deps.logger.info("Feed API service stopped")

    return build_app(lifespan=lifespan, cors_origins=config.server.cors_origins)


def run():
    """Entry point for console script."""
    config = load_config()
    uvicorn.run(create_app(config), host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    run()
