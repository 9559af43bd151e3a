"""Interface for password hashing."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPasswordHasher(Protocol):
    async def hash(self, plaintext: str) -> str:
        """Hash a password for storage."""
        ...

    async def compare(self, plaintext: str, hashed: str) -> bool:
        """Check a password against a stored hash."""
        ...


__all__ = ["IPasswordHasher"]
