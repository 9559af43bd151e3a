import uuid
from typing import List, Optional, Protocol, runtime_checkable

from internal.model import User
from .option import GetOneOptions, OwnedPostOptions, SaveOptions


@runtime_checkable
class IUserRepository(Protocol):
    # Credentials
    async def save(self, opt: SaveOptions) -> User: ...
    async def detail(self, id: uuid.UUID) -> Optional[User]: ...
    async def get_one(self, opt: GetOneOptions) -> Optional[User]: ...
    async def list_ids(self) -> List[uuid.UUID]: ...

    # Owned set
    async def add_post(self, opt: OwnedPostOptions) -> None: ...
    async def remove_post(self, opt: OwnedPostOptions) -> None: ...
    async def list_post_ids(self, user_id: uuid.UUID) -> List[uuid.UUID]: ...
    async def reconcile_owned_posts(self, user_id: uuid.UUID) -> int: ...


__all__ = ["IUserRepository"]
