"""Create method for the post use case.

The post record and the creator's owned set are two writes. A failure of
the second one leaves a post that its creator's owned set does not list;
it is logged as a divergence and surfaced as ErrInternal.
"""

from core.errors import ErrInternal, ErrValidationFailed
from internal.auth.helpers import require_authenticated
from internal.auth.type import AuthContext
from internal.notifier.type import LifecycleEvent
from internal.user.errors import ErrUserNotFound
from internal.user.repository.errors import RepositoryError as UserRepositoryError
from internal.user.repository.option import OwnedPostOptions
from ..type import CreatePostInput, PostOutput
from ..repository.errors import RepositoryError
from ..repository.option import CreateOptions
from .helpers import to_post_output, validate_image, validate_post_fields


async def create(self, auth: AuthContext, input_data: CreatePostInput) -> PostOutput:
    user_id = require_authenticated(auth)

    errors = validate_post_fields(input_data.title, input_data.content)
    validate_image(errors, input_data.image_url)
    if errors:
        raise ErrValidationFailed(errors)

    try:
        user = await self.user_repository.detail(user_id)
    except UserRepositoryError as e:
        self.logger.error(f"internal.post.usecase.create: {e}")
        raise ErrInternal() from e

    if user is None:
        raise ErrUserNotFound()

    try:
        post = await self.repository.create(
            CreateOptions(
                title=input_data.title.strip(),
                content=input_data.content.strip(),
                image_url=input_data.image_url.strip(),
                creator_id=user_id,
            )
        )
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.create: {e}")
        raise ErrInternal() from e

    try:
        await self.user_repository.add_post(OwnedPostOptions(user_id=user_id, post_id=post.id))
    except UserRepositoryError as e:
        self.logger.error(
            f"internal.post.usecase.create: owned set diverged: post {post.id} saved "
            f"but not added to user {user_id}: {e}"
        )
        raise ErrInternal() from e

    output = to_post_output(post, creator=user)
    self.notifier.publish(LifecycleEvent.created(output.to_dict()))

    self.logger.info(f"internal.post.usecase.create: post {post.id} created by {user_id}")
    return output
