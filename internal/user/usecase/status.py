from core.errors import ErrInternal
from internal.auth.helpers import require_authenticated
from internal.auth.type import AuthContext
from ..errors import ErrUserNotFound
from ..type import UpdateStatusInput
from ..repository.errors import RepositoryError
from ..repository.option import SaveOptions


async def get_status(self, auth: AuthContext) -> str:
    user_id = require_authenticated(auth)

    try:
        user = await self.repository.detail(user_id)
    except RepositoryError as e:
        self.logger.error(f"internal.user.usecase.get_status: {e}")
        raise ErrInternal() from e

    if user is None:
        raise ErrUserNotFound()
    return user.status


async def update_status(self, auth: AuthContext, input_data: UpdateStatusInput) -> str:
    user_id = require_authenticated(auth)

    try:
        user = await self.repository.detail(user_id)
        if user is None:
            raise ErrUserNotFound()

        updated = await self.repository.save(
            SaveOptions(id=user_id, status=input_data.status or "")
        )
    except RepositoryError as e:
        self.logger.error(f"internal.user.usecase.update_status: {e}")
        raise ErrInternal() from e

    return updated.status
