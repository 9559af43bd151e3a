import asyncio

import bcrypt

from .constant import *
from .interface import IPasswordHasher
from .type import BcryptConfig


class BcryptHasher(IPasswordHasher):
    """bcrypt password hasher.

    Hashing is CPU bound, so both calls run in a worker thread to keep the
    event loop responsive.
    """

    def __init__(self, config: BcryptConfig):
        self.config = config

    async def hash(self, plaintext: str) -> str:
        return await asyncio.to_thread(self._hash, plaintext)

    async def compare(self, plaintext: str, hashed: str) -> bool:
        return await asyncio.to_thread(self._compare, plaintext, hashed)

    def _hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.config.rounds)
        return bcrypt.hashpw(plaintext.encode(ENCODING), salt).decode(ENCODING)

    def _compare(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(plaintext.encode(ENCODING), hashed.encode(ENCODING))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


__all__ = ["BcryptHasher"]
