"""ORM model for the owned-post set (one row per user/post pair).

post_id deliberately has no foreign key to posts: the post record and the
owned set are two separate resources written in two steps.
"""

from sqlalchemy import Column, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID

from .base import Base


class UserPost(Base):
    __tablename__ = "user_posts"
    __table_args__ = (Index("idx_user_posts_post", "post_id"),)

    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    post_id = Column(UUID(as_uuid=True), primary_key=True)


__all__ = ["UserPost"]
