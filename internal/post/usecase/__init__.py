from .usecase import PostUseCase
from .new import New

__all__ = ["PostUseCase", "New"]
