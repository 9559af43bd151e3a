from .base import Base
from .user import User
from .post import Post
from .user_post import UserPost

__all__ = [
    "Base",
    "User",
    "Post",
    "UserPost",
]
