"""Domain repository errors for post."""


class RepositoryError(Exception):
    """Base exception for repository operations."""
    pass


class ErrFailedToCreate(RepositoryError):
    pass


class ErrFailedToGet(RepositoryError):
    pass


class ErrFailedToUpdate(RepositoryError):
    pass


class ErrFailedToDelete(RepositoryError):
    pass


class ErrInvalidData(RepositoryError):
    """Raised when input data is invalid."""
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrFailedToUpdate",
    "ErrFailedToDelete",
    "ErrInvalidData",
]
