from typing import Optional

from core.validation import parse_uuid
from pkg.jwt.jwt import ErrInvalidToken
from ..constant import BEARER_SCHEME, CLAIM_USER_ID
from ..type import AuthContext


def authenticate(self, token: Optional[str]) -> AuthContext:
    if not token:
        return AuthContext.anonymous()

    try:
        claims = self.token_service.verify(token)
    except ErrInvalidToken as e:
        self.logger.debug(f"internal.auth.usecase.authenticate: rejected token: {e}")
        return AuthContext.anonymous()

    user_id = parse_uuid(claims.get(CLAIM_USER_ID))
    if user_id is None:
        self.logger.debug("internal.auth.usecase.authenticate: token without a valid userId claim")
        return AuthContext.anonymous()

    return AuthContext.authenticated(user_id)


def token_from_header(header: Optional[str]) -> Optional[str]:
    """Extract the token from 'Bearer <token>'; None when absent or malformed."""
    if not header:
        return None
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


def authenticate_header(self, header: Optional[str]) -> AuthContext:
    return authenticate(self, token_from_header(header))
