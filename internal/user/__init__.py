"""User domain: signup, login and status of feed accounts."""

from .interface import IUserUseCase
from .type import SignupInput, LoginInput, LoginOutput, UpdateStatusInput, ReconcileOutput
from .errors import ErrUserNotFound, ErrEmailExists, ErrInvalidCredentials
from .usecase.new import New as NewUserUseCase

__all__ = [
    # Interface
    "IUserUseCase",
    # Types
    "SignupInput",
    "LoginInput",
    "LoginOutput",
    "UpdateStatusInput",
    "ReconcileOutput",
    # Errors
    "ErrUserNotFound",
    "ErrEmailExists",
    "ErrInvalidCredentials",
    # Factory
    "NewUserUseCase",
]
