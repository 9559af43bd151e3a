from dataclasses import dataclass

from .constant import *


@dataclass
class BcryptConfig:
    """Password hashing configuration.

    Attributes:
        rounds: bcrypt cost factor (log2 of the iteration count)
    """

    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self):
        if not MIN_ROUNDS <= self.rounds <= MAX_ROUNDS:
            raise ValueError(ERROR_INVALID_ROUNDS.format(rounds=self.rounds))


__all__ = ["BcryptConfig"]
