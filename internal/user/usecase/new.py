from pkg.logger.logger import Logger
from pkg.bcrypt.interface import IPasswordHasher
from pkg.jwt.interface import ITokenService
from ..repository.interface import IUserRepository
from ..interface import IUserUseCase
from .usecase import UserUseCase


def New(
    repository: IUserRepository,
    hasher: IPasswordHasher,
    token_service: ITokenService,
    logger: Logger,
) -> IUserUseCase:
    return UserUseCase(
        repository=repository,
        hasher=hasher,
        token_service=token_service,
        logger=logger,
    )


__all__ = ["New"]
