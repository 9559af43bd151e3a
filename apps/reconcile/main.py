"""Rebuild users' owned-post sets from the posts table.

Usage:
    feed-reconcile                 # every user
    feed-reconcile alice@example.com
"""

import asyncio
import sys
from typing import List, Optional

from pkg.logger.logger import Logger, LoggerConfig
from pkg.postgre.postgres import PostgresDatabase
from pkg.postgre.type import PostgresConfig
from pkg.jwt.jwt import JWTManager
from pkg.jwt.type import JWTConfig
from pkg.bcrypt.bcrypt import BcryptHasher
from pkg.bcrypt.type import BcryptConfig
from config.config import load_config, Config
from core.errors import AppError
from internal.model.constant import LOGGER_ENABLE_CONSOLE, LOGGER_SERVICE_NAME
from internal.user import NewUserUseCase, ReconcileOutput
from internal.user.repository import New as NewUserRepository


async def reconcile(config: Config, email: Optional[str] = None) -> ReconcileOutput:
    logger = Logger(
        LoggerConfig(
            level=config.logging.level,
            enable_console=LOGGER_ENABLE_CONSOLE,
            colorize=config.logging.colorize,
            service_name=config.server.service_name or LOGGER_SERVICE_NAME,
        )
    )

    db = PostgresDatabase(
        PostgresConfig(
            database_url=config.database.url,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow,
            echo=config.database.echo,
        )
    )
    try:
        if not await db.health_check():
            raise RuntimeError("PostgreSQL health check failed")

        user = NewUserUseCase(
            NewUserRepository(db, logger),
            BcryptHasher(BcryptConfig(rounds=config.auth.bcrypt_rounds)),
            JWTManager(
                JWTConfig(
                    secret=config.auth.jwt_secret,
                    algorithm=config.auth.jwt_algorithm,
                    expires_in=config.auth.token_ttl,
                )
            ),
            logger,
        )
        return await user.reconcile_owned_posts(email)
    finally:
        await db.close()


def run(argv: Optional[List[str]] = None) -> int:
    """Entry point for console script."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        print("Usage: feed-reconcile [email]")
        return 2

    try:
        output = asyncio.run(reconcile(load_config(), args[0] if args else None))
    except AppError as e:
        print(f"Reconcile failed: {e}")
        return 1

    print(f"Rebuilt {output.users} owned sets ({output.entries} entries).")
    for user_id in output.diverged:
        print(f"  repaired {user_id}")
    return 0


if __name__ == "__main__":
    sys.exit(run())
