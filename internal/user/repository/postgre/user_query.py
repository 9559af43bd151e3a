import uuid

from sqlalchemy import delete as sql_delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert

from internal.model import Post, User, UserPost
from ..option import GetOneOptions, OwnedPostOptions
from .helpers import normalize_email


def build_get_one_query(opt: GetOneOptions):
    stmt = select(User)

    if opt.id:
        stmt = stmt.where(User.id == opt.id)
    if opt.email:
        stmt = stmt.where(User.email == normalize_email(opt.email))

    stmt = stmt.limit(1)
    return stmt


def build_add_post_query(opt: OwnedPostOptions):
    # Appending twice is a no-op, so a retried Create cannot duplicate the entry
    return (
        pg_insert(UserPost)
        .values(user_id=opt.user_id, post_id=opt.post_id)
        .on_conflict_do_nothing(index_elements=["user_id", "post_id"])
    )


def build_remove_post_query(opt: OwnedPostOptions):
    return sql_delete(UserPost).where(
        UserPost.user_id == opt.user_id,
        UserPost.post_id == opt.post_id,
    )


def build_list_ids_query():
    return select(User.id).order_by(User.created_at, User.id)


def build_list_post_ids_query(user_id: uuid.UUID):
    return select(UserPost.post_id).where(UserPost.user_id == user_id)


def build_clear_owned_posts_query(user_id: uuid.UUID):
    return sql_delete(UserPost).where(UserPost.user_id == user_id)


def build_rebuild_owned_posts_query(user_id: uuid.UUID):
    """INSERT ... SELECT of every post whose creator is user_id."""
    source = select(Post.creator_id, Post.id).where(Post.creator_id == user_id)
    return pg_insert(UserPost).from_select(["user_id", "post_id"], source)


__all__ = [
    "build_get_one_query",
    "build_add_post_query",
    "build_remove_post_query",
    "build_list_ids_query",
    "build_list_post_ids_query",
    "build_clear_owned_posts_query",
    "build_rebuild_owned_posts_query",
]
