from core.errors import ErrInternal
from internal.auth.helpers import require_authenticated
from internal.auth.type import AuthContext
from internal.notifier.type import LifecycleEvent
from internal.user.repository.errors import RepositoryError as UserRepositoryError
from internal.user.repository.option import OwnedPostOptions
from ..errors import ErrNotPostOwner, ErrPostNotFound
from ..repository.errors import RepositoryError
from .helpers import parse_post_id


async def delete(self, auth: AuthContext, post_id: str) -> None:
    """Delete a post, its image and its owned-set entry.

    Image removal is scheduled whatever the outcome of the record delete
    and never fails the operation.
    """
    user_id = require_authenticated(auth)
    pid = parse_post_id(post_id)

    async with self.locks.get(pid):
        try:
            post = await self.repository.detail(pid)
        except RepositoryError as e:
            self.logger.error(f"internal.post.usecase.delete: {e}")
            raise ErrInternal() from e

        if post is None:
            raise ErrPostNotFound()
        if post.creator_id != user_id:
            raise ErrNotPostOwner()

        try:
            deleted = await self.repository.delete(pid)
        except RepositoryError as e:
            self.logger.error(f"internal.post.usecase.delete: {e}")
            raise ErrInternal() from e
        finally:
            self.schedule_image_removal(post.image_url)

        if not deleted:
            raise ErrPostNotFound()

        # The record is gone from here on: observers hear about it even if
        # the owned set cannot be updated
        self.notifier.publish(LifecycleEvent.deleted(str(pid)))

        try:
            await self.user_repository.remove_post(OwnedPostOptions(user_id=post.creator_id, post_id=pid))
        except UserRepositoryError as e:
            self.logger.error(
                f"internal.post.usecase.delete: owned set diverged: post {pid} deleted "
                f"but still listed for user {post.creator_id}: {e}"
            )
            raise ErrInternal() from e

    self.logger.info(f"internal.post.usecase.delete: post {pid} deleted by {user_id}")
