from .usecase import UserUseCase
from .new import New

__all__ = ["UserUseCase", "New"]
