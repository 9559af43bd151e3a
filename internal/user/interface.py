from typing import Optional, Protocol, runtime_checkable

from internal.auth.type import AuthContext
from .type import LoginInput, LoginOutput, ReconcileOutput, SignupInput, UpdateStatusInput


@runtime_checkable
class IUserUseCase(Protocol):
    # Account
    async def signup(self, input_data: SignupInput) -> str:
        ...

    async def login(self, input_data: LoginInput) -> LoginOutput:
        ...

    # Status
    async def get_status(self, auth: AuthContext) -> str:
        ...

    async def update_status(self, auth: AuthContext, input_data: UpdateStatusInput) -> str:
        ...

    # Maintenance
    async def reconcile_owned_posts(self, email: Optional[str] = None) -> ReconcileOutput:
        ...


__all__ = ["IUserUseCase"]
