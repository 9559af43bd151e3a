from pkg.logger.logger import Logger
from pkg.jwt.interface import ITokenService
from ..interface import IAuthUseCase
from .usecase import AuthUseCase


def New(token_service: ITokenService, logger: Logger) -> IAuthUseCase:
    return AuthUseCase(token_service=token_service, logger=logger)


__all__ = ["New"]
