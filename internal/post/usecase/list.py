from core.errors import ErrInternal
from internal.auth.helpers import require_authenticated
from internal.auth.type import AuthContext
from ..type import ListPostsInput, ListPostsOutput
from ..repository.errors import RepositoryError
from ..repository.option import ListOptions
from .helpers import to_post_output


async def list(self, auth: AuthContext, input_data: ListPostsInput) -> ListPostsOutput:
    """One page of the feed, newest first, plus the total post count."""
    require_authenticated(auth)

    page = max(input_data.page or 1, 1)
    per_page = self.config.per_page

    try:
        total = await self.repository.count()
        posts = await self.repository.list(ListOptions(offset=(page - 1) * per_page, limit=per_page))
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.list: {e}")
        raise ErrInternal() from e

    return ListPostsOutput(posts=[to_post_output(p) for p in posts], total_posts=total)
