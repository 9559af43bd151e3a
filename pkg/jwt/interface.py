"""Interface for token signing and verification."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class ITokenService(Protocol):
    def sign(self, claims: Dict[str, Any], expires_in: Optional[int] = None) -> str:
        """Sign claims into a token that expires after expires_in seconds."""
        ...

    def verify(self, token: str) -> Dict[str, Any]:
        """Return the claims of a valid token; raise ErrInvalidToken otherwise."""
        ...


__all__ = ["ITokenService"]
