from dataclasses import dataclass

from .constant import *


@dataclass
class JWTConfig:
    """Token signing configuration.

    Attributes:
        secret: Shared signing key
        algorithm: HMAC algorithm
        expires_in: Default token lifetime in seconds
    """

    secret: str
    algorithm: str = DEFAULT_ALGORITHM
    expires_in: int = DEFAULT_EXPIRES_IN

    def __post_init__(self):
        if not self.secret or not self.secret.strip():
            raise ValueError(ERROR_SECRET_EMPTY)
        if self.algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                ERROR_UNSUPPORTED_ALGORITHM.format(
                    algorithms=SUPPORTED_ALGORITHMS, algorithm=self.algorithm
                )
            )
        if self.expires_in <= 0:
            raise ValueError(ERROR_EXPIRES_IN_POSITIVE)


__all__ = ["JWTConfig"]
