from .interface import IPostRepository
from .new import New
from .option import CreateOptions, UpdateOptions, ListOptions
from .errors import (
    RepositoryError,
    ErrFailedToCreate,
    ErrFailedToGet,
    ErrFailedToUpdate,
    ErrFailedToDelete,
    ErrInvalidData,
)

__all__ = [
    "IPostRepository",
    "New",
    "CreateOptions",
    "UpdateOptions",
    "ListOptions",
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrFailedToUpdate",
    "ErrFailedToDelete",
    "ErrInvalidData",
]
