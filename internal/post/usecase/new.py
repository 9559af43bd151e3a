from typing import Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IBlobStore
from internal.notifier.interface import INotifier
from internal.user.repository.interface import IUserRepository
from ..interface import IPostUseCase
from ..repository.interface import IPostRepository
from ..type import Config
from .usecase import PostUseCase


def New(
    repository: IPostRepository,
    user_repository: IUserRepository,
    blob_store: IBlobStore,
    notifier: INotifier,
    logger: Logger,
    config: Optional[Config] = None,
) -> IPostUseCase:
    return PostUseCase(
        repository=repository,
        user_repository=user_repository,
        blob_store=blob_store,
        notifier=notifier,
        logger=logger,
        config=config,
    )


__all__ = ["New"]
