"""ORM model for the posts table."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from .base import Base
from .constant import IMAGE_URL_MAX_LENGTH, TITLE_MAX_LENGTH


class Post(Base):
    """A user-authored feed entry with exactly one image and one creator."""

    __tablename__ = "posts"
    __table_args__ = (
        Index("idx_posts_created", "created_at"),
        Index("idx_posts_creator", "creator_id"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String(IMAGE_URL_MAX_LENGTH), nullable=False)
    creator_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    )
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    # Loaded explicitly with joinedload(); lazy loads are not allowed under asyncio
    creator = relationship("User", lazy="raise")

    def __repr__(self) -> str:
        return f"<Post id={self.id} title={self.title!r}>"


__all__ = ["Post"]
