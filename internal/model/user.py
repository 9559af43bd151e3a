"""ORM model for the users table.

Holds identity and credentials. The set of posts a user owns lives in
``user_posts`` (see user_post.py) and is maintained explicitly by the post
lifecycle manager.
"""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.dialects.postgresql import UUID

from .base import Base
from .constant import DEFAULT_USER_STATUS, EMAIL_MAX_LENGTH, NAME_MAX_LENGTH


class User(Base):
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True)
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False, unique=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    password = Column(String(255), nullable=False)
    status = Column(String(255), nullable=False, default=DEFAULT_USER_STATUS)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"


__all__ = ["User"]
