"""Query builders for the post repository.

Convention: Pure query building, returns SQLAlchemy statements.
No DB execution, no domain mapping.
"""

import uuid

from sqlalchemy import delete as sql_delete, func, select
from sqlalchemy.orm import joinedload

from internal.model import Post
from ..option import ListOptions


def build_detail_query(id: uuid.UUID):
    return select(Post).options(joinedload(Post.creator)).where(Post.id == id).limit(1)


def build_list_query(opt: ListOptions):
    """Newest first; id breaks ties between posts created in the same instant."""
    stmt = (
        select(Post)
        .options(joinedload(Post.creator))
        .order_by(Post.created_at.desc(), Post.id.desc())
    )

    if opt.offset > 0:
        stmt = stmt.offset(opt.offset)
    if opt.limit > 0:
        stmt = stmt.limit(opt.limit)

    return stmt


def build_count_query():
    return select(func.count()).select_from(Post)


def build_delete_query(id: uuid.UUID):
    return sql_delete(Post).where(Post.id == id)


__all__ = [
    "build_detail_query",
    "build_list_query",
    "build_count_query",
    "build_delete_query",
]
