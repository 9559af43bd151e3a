from .post import PostPostgresRepository

__all__ = ["PostPostgresRepository"]
