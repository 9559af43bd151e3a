from typing import Optional

from pkg.logger.logger import Logger
from pkg.bcrypt.interface import IPasswordHasher
from pkg.jwt.interface import ITokenService
from internal.auth.type import AuthContext

from ..interface import IUserUseCase
from ..repository.interface import IUserRepository
from ..type import LoginInput, LoginOutput, ReconcileOutput, SignupInput, UpdateStatusInput
from .login import login as _login
from .reconcile import reconcile_owned_posts as _reconcile_owned_posts
from .signup import signup as _signup
from .status import get_status as _get_status
from .status import update_status as _update_status


class UserUseCase(IUserUseCase):
    def __init__(
        self,
        repository: IUserRepository,
        hasher: IPasswordHasher,
        token_service: ITokenService,
        logger: Logger,
    ) -> None:
        self.repository = repository
        self.hasher = hasher
        self.token_service = token_service
        self.logger = logger

    async def signup(self, input_data: SignupInput) -> str:
        return await _signup(self, input_data)

    async def login(self, input_data: LoginInput) -> LoginOutput:
        return await _login(self, input_data)

    async def get_status(self, auth: AuthContext) -> str:
        return await _get_status(self, auth)

    async def update_status(self, auth: AuthContext, input_data: UpdateStatusInput) -> str:
        return await _update_status(self, auth, input_data)

    async def reconcile_owned_posts(self, email: Optional[str] = None) -> ReconcileOutput:
        return await _reconcile_owned_posts(self, email)
