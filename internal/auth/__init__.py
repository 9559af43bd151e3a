"""Auth domain: turns bearer tokens into per-request AuthContext values."""

from .interface import IAuthUseCase
from .type import AuthContext
from .helpers import require_authenticated
from .usecase.new import New as NewAuthUseCase

__all__ = [
    "IAuthUseCase",
    "AuthContext",
    "require_authenticated",
    "NewAuthUseCase",
]
