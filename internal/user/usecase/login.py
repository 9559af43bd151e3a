from core.errors import ErrInternal
from ..constant import CLAIM_EMAIL, CLAIM_USER_ID
from ..errors import ErrInvalidCredentials
from ..type import LoginInput, LoginOutput
from ..repository.errors import RepositoryError
from ..repository.option import GetOneOptions


async def login(self, input_data: LoginInput) -> LoginOutput:
    try:
        user = await self.repository.get_one(GetOneOptions(email=input_data.email or ""))
    except RepositoryError as e:
        self.logger.error(f"internal.user.usecase.login: {e}")
        raise ErrInternal() from e

    if user is None or not input_data.password:
        raise ErrInvalidCredentials()

    if not await self.hasher.compare(input_data.password, user.password):
        raise ErrInvalidCredentials()

    user_id = str(user.id)
    token = self.token_service.sign({CLAIM_USER_ID: user_id, CLAIM_EMAIL: user.email})
    return LoginOutput(token=token, user_id=user_id)
