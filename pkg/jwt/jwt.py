from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from .constant import *
from .interface import ITokenService
from .type import JWTConfig


class ErrInvalidToken(Exception):
    """Raised when a token is malformed, tampered with or expired."""

    pass


class JWTManager(ITokenService):
    """HMAC JSON Web Tokens backed by PyJWT."""

    def __init__(self, config: JWTConfig):
        self.config = config

    def sign(self, claims: Dict[str, Any], expires_in: Optional[int] = None) -> str:
        now = datetime.now(timezone.utc)
        lifetime = expires_in if expires_in is not None else self.config.expires_in
        payload = dict(claims)
        payload[CLAIM_ISSUED_AT] = now
        payload[CLAIM_EXPIRES_AT] = now + timedelta(seconds=lifetime)
        return jwt.encode(payload, self.config.secret, algorithm=self.config.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.config.secret,
                algorithms=[self.config.algorithm],
                options={"require": [CLAIM_EXPIRES_AT]},
            )
        except jwt.PyJWTError as exc:
            raise ErrInvalidToken(str(exc)) from exc


__all__ = [
    "JWTManager",
    "ErrInvalidToken",
]
