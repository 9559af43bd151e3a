from .handler import router

__all__ = ["router"]
