from core.errors import ErrInternal, ErrValidationFailed
from internal.auth.helpers import require_authenticated
from internal.auth.type import AuthContext
from internal.notifier.type import LifecycleEvent
from ..errors import ErrNotPostOwner, ErrPostNotFound
from ..type import PostOutput, UpdatePostInput
from ..repository.errors import RepositoryError
from ..repository.option import UpdateOptions
from .helpers import normalize_image, parse_post_id, to_post_output, validate_post_fields


async def update(self, auth: AuthContext, post_id: str, input_data: UpdatePostInput) -> PostOutput:
    """Replace title/content and optionally the image.

    The old image is removed only after the new state is saved, so a
    failed save never leaves the post pointing at a deleted file.
    """
    user_id = require_authenticated(auth)
    pid = parse_post_id(post_id)
    new_image = normalize_image(input_data.image_url)

    async with self.locks.get(pid):
        try:
            post = await self.repository.detail(pid)
        except RepositoryError as e:
            self.logger.error(f"internal.post.usecase.update: {e}")
            raise ErrInternal() from e

        if post is None:
            raise ErrPostNotFound()
        if post.creator_id != user_id:
            raise ErrNotPostOwner()

        errors = validate_post_fields(input_data.title, input_data.content)
        if errors:
            raise ErrValidationFailed(errors)

        old_image = post.image_url

        try:
            updated = await self.repository.update(
                UpdateOptions(
                    id=pid,
                    title=input_data.title.strip(),
                    content=input_data.content.strip(),
                    image_url=new_image,
                )
            )
        except RepositoryError as e:
            self.logger.error(f"internal.post.usecase.update: {e}")
            raise ErrInternal() from e

        if updated is None:
            raise ErrPostNotFound()

    if new_image is not None and new_image != old_image:
        self.schedule_image_removal(old_image)

    output = to_post_output(updated, creator=post.creator)
    self.notifier.publish(LifecycleEvent.updated(output.to_dict()))
    return output
