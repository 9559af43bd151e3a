from typing import Optional

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.user import UserPostgresRepository


def New(
    db: PostgresDatabase,
    logger: Optional[Logger] = None,
) -> UserPostgresRepository:
    return UserPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
