from .user import UserPostgresRepository

__all__ = ["UserPostgresRepository"]
