from typing import Optional, Protocol, runtime_checkable

from .type import AuthContext


@runtime_checkable
class IAuthUseCase(Protocol):
    def authenticate(self, token: Optional[str]) -> AuthContext:
        """Build an AuthContext from a bearer token. Never raises."""
        ...

    def authenticate_header(self, header: Optional[str]) -> AuthContext:
        """Same as authenticate, from a raw Authorization header value."""
        ...


__all__ = ["IAuthUseCase"]
