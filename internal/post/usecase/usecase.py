"""Post lifecycle use case."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IBlobStore
from internal.auth.type import AuthContext
from internal.notifier.interface import INotifier
from internal.user.repository.interface import IUserRepository
from ..constant import BLOB_REMOVAL_TASK_PREFIX
from ..interface import IPostUseCase
from ..repository.interface import IPostRepository
from ..type import (
    Config,
    CreatePostInput,
    ListPostsInput,
    ListPostsOutput,
    PostOutput,
    UpdatePostInput,
)
from .create import create as _create
from .delete import delete as _delete
from .get import get as _get
from .helpers import BackgroundTasks, PostLocks
from .list import list as _list
from .update import update as _update


class PostUseCase(IPostUseCase):
    """Sole writer of posts and of the users' owned sets."""

    def __init__(
        self,
        repository: IPostRepository,
        user_repository: IUserRepository,
        blob_store: IBlobStore,
        notifier: INotifier,
        logger: Logger,
        config: Optional[Config] = None,
    ):
        self.repository = repository
        self.user_repository = user_repository
        self.blob_store = blob_store
        self.notifier = notifier
        self.logger = logger
        self.config = config or Config()
        self.locks = PostLocks()
        self.tasks = BackgroundTasks()

    async def list(self, auth: AuthContext, input_data: ListPostsInput) -> ListPostsOutput:
        return await _list(self, auth, input_data)

    async def get(self, auth: AuthContext, post_id: str) -> PostOutput:
        return await _get(self, auth, post_id)

    async def create(self, auth: AuthContext, input_data: CreatePostInput) -> PostOutput:
        return await _create(self, auth, input_data)

    async def update(self, auth: AuthContext, post_id: str, input_data: UpdatePostInput) -> PostOutput:
        return await _update(self, auth, post_id, input_data)

    async def delete(self, auth: AuthContext, post_id: str) -> None:
        return await _delete(self, auth, post_id)

    def schedule_image_removal(self, path: Optional[str]) -> None:
        """Remove an image in the background; the caller never waits for it."""
        if not path:
            return
        self.tasks.spawn(self._remove_image(path), name=f"{BLOB_REMOVAL_TASK_PREFIX}:{path}")

    async def _remove_image(self, path: str) -> None:
        try:
            await self.blob_store.remove(path)
        except Exception as e:
            self.logger.error(f"internal.post.usecase.remove_image: {path}: {e}")

    async def close(self) -> None:
        await self.tasks.drain()


__all__ = ["PostUseCase"]
