from typing import Optional

from pkg.logger.logger import Logger
from pkg.jwt.interface import ITokenService

from ..interface import IAuthUseCase
from ..type import AuthContext
from .authenticate import authenticate as _authenticate
from .authenticate import authenticate_header as _authenticate_header


class AuthUseCase(IAuthUseCase):
    """Permissive authenticator: bad tokens produce an anonymous context.

    Operations that need a caller reject anonymous contexts themselves.
    """

    def __init__(self, token_service: ITokenService, logger: Logger) -> None:
        self.token_service = token_service
        self.logger = logger

    def authenticate(self, token: Optional[str]) -> AuthContext:
        return _authenticate(self, token)

    def authenticate_header(self, header: Optional[str]) -> AuthContext:
        return _authenticate_header(self, header)
