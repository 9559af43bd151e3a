from .usecase import AuthUseCase
from .new import New

__all__ = ["AuthUseCase", "New"]
