class RepositoryError(Exception):
    pass


class ErrFailedToSave(RepositoryError):
    pass


class ErrFailedToGet(RepositoryError):
    pass


class ErrFailedToUpdateOwnedPosts(RepositoryError):
    pass


class ErrDuplicateEmail(RepositoryError):
    pass


class ErrInvalidData(RepositoryError):
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToSave",
    "ErrFailedToGet",
    "ErrFailedToUpdateOwnedPosts",
    "ErrDuplicateEmail",
    "ErrInvalidData",
]
