"""PostgreSQL repository for posts.

Convention: Coordinator file, calls query builders, executes, maps to domain model.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.model import Post
from ..interface import IPostRepository
from ..option import CreateOptions, ListOptions, UpdateOptions
from ..errors import (
    ErrFailedToCreate,
    ErrFailedToDelete,
    ErrFailedToGet,
    ErrFailedToUpdate,
)
from .post_query import (
    build_count_query,
    build_delete_query,
    build_detail_query,
    build_list_query,
)
from .helpers import transform_to_new_post, transform_to_post_changes


class PostPostgresRepository(IPostRepository):
    """PostgreSQL implementation of the post store."""

    def __init__(self, db: PostgresDatabase, logger: Optional[Logger] = None) -> None:
        self.db = db
        self.logger = logger

    def _log_error(self, method: str, exc: Exception) -> None:
        if self.logger:
            self.logger.error(f"internal.post.repository.postgre.post.{method}: {exc}")

    async def create(self, opt: CreateOptions) -> Post:
        data = transform_to_new_post(opt)

        try:
            async with self.db.get_session() as session:
                session.add(Post(**data))
                await session.commit()

                # Reload with the creator joined so callers can render it
                result = await session.execute(build_detail_query(data["id"]))
                post = result.scalar_one()

                if self.logger:
                    self.logger.debug(f"internal.post.repository.postgre.post.create: id={post.id}")
                return post

        except SQLAlchemyError as exc:
            self._log_error("create", exc)
            raise ErrFailedToCreate(f"create: {exc}") from exc

    async def update(self, opt: UpdateOptions) -> Optional[Post]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_detail_query(opt.id))
                post = result.scalar_one_or_none()

                if post is None:
                    return None

                for key, value in transform_to_post_changes(opt).items():
                    setattr(post, key, value)

                await session.commit()
                return post

        except SQLAlchemyError as exc:
            self._log_error("update", exc)
            raise ErrFailedToUpdate(f"update: {exc}") from exc

    async def delete(self, id: uuid.UUID) -> bool:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_delete_query(id))
                await session.commit()
                return result.rowcount > 0

        except SQLAlchemyError as exc:
            self._log_error("delete", exc)
            raise ErrFailedToDelete(f"delete: {exc}") from exc

    async def detail(self, id: uuid.UUID) -> Optional[Post]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_detail_query(id))
                return result.scalar_one_or_none()

        except SQLAlchemyError as exc:
            self._log_error("detail", exc)
            raise ErrFailedToGet(f"detail: {exc}") from exc

    async def list(self, opt: ListOptions) -> List[Post]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_query(opt))
                return list(result.scalars().all())

        except SQLAlchemyError as exc:
            self._log_error("list", exc)
            raise ErrFailedToGet(f"list: {exc}") from exc

    async def count(self) -> int:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_count_query())
                return int(result.scalar_one())

        except SQLAlchemyError as exc:
            self._log_error("count", exc)
            raise ErrFailedToGet(f"count: {exc}") from exc


__all__ = ["PostPostgresRepository"]
