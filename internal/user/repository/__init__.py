from .interface import IUserRepository
from .new import New
from .option import SaveOptions, GetOneOptions, OwnedPostOptions
from .errors import (
    RepositoryError,
    ErrFailedToSave,
    ErrFailedToGet,
    ErrFailedToUpdateOwnedPosts,
    ErrDuplicateEmail,
    ErrInvalidData,
)

__all__ = [
    "IUserRepository",
    "New",
    "SaveOptions",
    "GetOneOptions",
    "OwnedPostOptions",
    "RepositoryError",
    "ErrFailedToSave",
    "ErrFailedToGet",
    "ErrFailedToUpdateOwnedPosts",
    "ErrDuplicateEmail",
    "ErrInvalidData",
]
