from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.model import User
from ..interface import IUserRepository
from ..option import GetOneOptions, OwnedPostOptions, SaveOptions
from ..errors import (
    ErrDuplicateEmail,
    ErrFailedToGet,
    ErrFailedToSave,
    ErrFailedToUpdateOwnedPosts,
)
from .helpers import transform_to_new_user, transform_to_user_changes
from .user_query import (
    build_add_post_query,
    build_clear_owned_posts_query,
    build_get_one_query,
    build_list_ids_query,
    build_list_post_ids_query,
    build_rebuild_owned_posts_query,
    build_remove_post_query,
)


class UserPostgresRepository(IUserRepository):

    def __init__(self, db: PostgresDatabase, logger: Optional[Logger] = None):
        self.db = db
        self.logger = logger

    def _log_error(self, method: str, exc: Exception) -> None:
        if self.logger:
            self.logger.error(f"internal.user.repository.postgre.user.{method}: {exc}")

    async def save(self, opt: SaveOptions) -> User:
        try:
            async with self.db.get_session() as session:
                existing = None
                if opt.id:
                    stmt = select(User).where(User.id == opt.id)
                    result = await session.execute(stmt)
                    existing = result.scalar_one_or_none()

                if existing:
                    for key, value in transform_to_user_changes(opt).items():
                        setattr(existing, key, value)
                    record = existing
                else:
                    record = User(**transform_to_new_user(opt))
                    session.add(record)

                await session.commit()
                await session.refresh(record)

                return record

        except IntegrityError as exc:
            self._log_error("save", exc)
            raise ErrDuplicateEmail(exc) from exc
        except SQLAlchemyError as exc:
            self._log_error("save", exc)
            raise ErrFailedToSave(exc) from exc

    async def detail(self, id: uuid.UUID) -> Optional[User]:
        return await self.get_one(GetOneOptions(id=id))

    async def get_one(self, opt: GetOneOptions) -> Optional[User]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_get_one_query(opt))
                return result.scalar_one_or_none()

        except SQLAlchemyError as exc:
            self._log_error("get_one", exc)
            raise ErrFailedToGet(exc) from exc

    async def add_post(self, opt: OwnedPostOptions) -> None:
        try:
            async with self.db.get_session() as session:
                await session.execute(build_add_post_query(opt))
                await session.commit()

        except SQLAlchemyError as exc:
            self._log_error("add_post", exc)
            raise ErrFailedToUpdateOwnedPosts(exc) from exc

    async def remove_post(self, opt: OwnedPostOptions) -> None:
        try:
            async with self.db.get_session() as session:
                await session.execute(build_remove_post_query(opt))
                await session.commit()

        except SQLAlchemyError as exc:
            self._log_error("remove_post", exc)
            raise ErrFailedToUpdateOwnedPosts(exc) from exc

    async def list_ids(self) -> List[uuid.UUID]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_ids_query())
                return list(result.scalars().all())

        except SQLAlchemyError as exc:
            self._log_error("list_ids", exc)
            raise ErrFailedToGet(exc) from exc

    async def list_post_ids(self, user_id: uuid.UUID) -> List[uuid.UUID]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_post_ids_query(user_id))
                return list(result.scalars().all())

        except SQLAlchemyError as exc:
            self._log_error("list_post_ids", exc)
            raise ErrFailedToGet(exc) from exc

    async def reconcile_owned_posts(self, user_id: uuid.UUID) -> int:
        """Rebuild the owned set from posts.creator_id in one transaction."""
        try:
            async with self.db.get_session() as session:
                await session.execute(build_clear_owned_posts_query(user_id))
                result = await session.execute(build_rebuild_owned_posts_query(user_id))
                await session.commit()
                return result.rowcount

        except SQLAlchemyError as exc:
            self._log_error("reconcile_owned_posts", exc)
            raise ErrFailedToUpdateOwnedPosts(exc) from exc


__all__ = ["UserPostgresRepository"]
