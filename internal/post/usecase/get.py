from core.errors import ErrInternal
from internal.auth.helpers import require_authenticated
from internal.auth.type import AuthContext
from ..errors import ErrPostNotFound
from ..type import PostOutput
from ..repository.errors import RepositoryError
from .helpers import parse_post_id, to_post_output


async def get(self, auth: AuthContext, post_id: str) -> PostOutput:
    require_authenticated(auth)
    pid = parse_post_id(post_id)

    try:
        post = await self.repository.detail(pid)
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.get: {e}")
        raise ErrInternal() from e

    if post is None:
        raise ErrPostNotFound()
    return to_post_output(post)
