"""Shared fixtures: in-memory stand-ins for the stores around the use cases."""

import asyncio
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Set

import pytest

from pkg.logger.logger import Logger, LoggerConfig
from pkg.minio.constant import ALLOWED_MIME_TYPES, PUBLIC_PATH_PREFIX
from pkg.minio.minio import ErrUnsupportedMediaType
from pkg.minio.type import StoredObject
from pkg.jwt.jwt import JWTManager
from pkg.jwt.type import JWTConfig
from pkg.bcrypt.bcrypt import BcryptHasher
from pkg.bcrypt.type import BcryptConfig
from internal.auth import NewAuthUseCase
from internal.auth.type import AuthContext
from internal.model import Post, User
from internal.post import NewPostUseCase, Config as PostConfig
from internal.post.repository.errors import ErrFailedToCreate, ErrFailedToDelete, ErrFailedToUpdate
from internal.post.repository.option import CreateOptions, ListOptions, UpdateOptions
from internal.user import NewUserUseCase
from internal.user.repository.errors import ErrDuplicateEmail, ErrFailedToUpdateOwnedPosts
from internal.user.repository.option import GetOneOptions, OwnedPostOptions, SaveOptions

TEST_SECRET = "test-signing-key"
_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeUserRepository:
    def __init__(self):
        self.users: Dict[uuid.UUID, User] = {}
        self.owned: Dict[uuid.UUID, Set[uuid.UUID]] = {}
        self.calls: List[str] = []
        self.fail_add_post = False
        self.fail_remove_post = False
        # Shared with FakePostRepository.posts so reconciliation can read creators
        self.posts: Dict[uuid.UUID, Post] = {}

    def add_user(self, name: str = "Alice", email: Optional[str] = None, password: str = "hashed") -> User:
        now = datetime.now(timezone.utc)
        user = User(
            id=uuid.uuid4(),
            email=email or f"{name.lower()}@example.com",
            name=name,
            password=password,
            status="I am new!",
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        self.owned[user.id] = set()
        return user

    async def save(self, opt: SaveOptions) -> User:
        self.calls.append("save")
        if opt.id and opt.id in self.users:
            user = self.users[opt.id]
            for key in ("email", "name", "password", "status"):
                value = getattr(opt, key)
                if value is not None:
                    setattr(user, key, value)
            return user

        email = opt.email.strip().lower()
        if any(u.email == email for u in self.users.values()):
            raise ErrDuplicateEmail(email)
        user = self.add_user(name=opt.name, email=email, password=opt.password)
        return user

    async def detail(self, id: uuid.UUID) -> Optional[User]:
        self.calls.append("detail")
        return self.users.get(id)

    async def get_one(self, opt: GetOneOptions) -> Optional[User]:
        self.calls.append("get_one")
        for user in self.users.values():
            if opt.id and user.id != opt.id:
                continue
            if opt.email and user.email != opt.email.strip().lower():
                continue
            return user
        return None

    async def add_post(self, opt: OwnedPostOptions) -> None:
        self.calls.append("add_post")
        if self.fail_add_post:
            raise ErrFailedToUpdateOwnedPosts("add_post: connection reset")
        self.owned.setdefault(opt.user_id, set()).add(opt.post_id)

    async def remove_post(self, opt: OwnedPostOptions) -> None:
        self.calls.append("remove_post")
        if self.fail_remove_post:
            raise ErrFailedToUpdateOwnedPosts("remove_post: connection reset")
        self.owned.setdefault(opt.user_id, set()).discard(opt.post_id)

    async def list_post_ids(self, user_id: uuid.UUID) -> List[uuid.UUID]:
        self.calls.append("list_post_ids")
        return list(self.owned.get(user_id, set()))

    async def list_ids(self) -> List[uuid.UUID]:
        self.calls.append("list_ids")
        return list(self.users)

    async def reconcile_owned_posts(self, user_id: uuid.UUID) -> int:
        self.calls.append("reconcile_owned_posts")
        rebuilt = {p.id for p in self.posts.values() if p.creator_id == user_id}
        self.owned[user_id] = rebuilt
        return len(rebuilt)


class FakePostRepository:
    """Posts get strictly increasing created_at values in creation order."""

    def __init__(self, users: FakeUserRepository):
        self.users = users
        self.posts: Dict[uuid.UUID, Post] = users.posts
        self.calls: List[str] = []
        self.fail_create = False
        self.fail_update = False
        self.fail_delete = False
        self._tick = 0

    def _now(self) -> datetime:
        self._tick += 1
        return _EPOCH + timedelta(seconds=self._tick)

    async def create(self, opt: CreateOptions) -> Post:
        self.calls.append("create")
        if self.fail_create:
            raise ErrFailedToCreate("create: connection reset")
        now = self._now()
        post = Post(
            id=uuid.uuid4(),
            title=opt.title,
            content=opt.content,
            image_url=opt.image_url,
            creator_id=opt.creator_id,
            created_at=now,
            updated_at=now,
        )
        post.creator = self.users.users.get(opt.creator_id)
        self.posts[post.id] = post
        return post

    async def update(self, opt: UpdateOptions) -> Optional[Post]:
        self.calls.append("update")
        await asyncio.sleep(0)
        if self.fail_update:
            raise ErrFailedToUpdate("update: connection reset")
        post = self.posts.get(opt.id)
        if post is None:
            return None
        if opt.title is not None:
            post.title = opt.title
        if opt.content is not None:
            post.content = opt.content
        if opt.image_url:
            post.image_url = opt.image_url
        post.updated_at = self._now()
        return post

    async def delete(self, id: uuid.UUID) -> bool:
        self.calls.append("delete")
        if self.fail_delete:
            raise ErrFailedToDelete("delete: connection reset")
        return self.posts.pop(id, None) is not None

    async def detail(self, id: uuid.UUID) -> Optional[Post]:
        self.calls.append("detail")
        await asyncio.sleep(0)
        return self.posts.get(id)

    async def list(self, opt: ListOptions) -> List[Post]:
        self.calls.append("list")
        ordered = sorted(self.posts.values(), key=lambda p: (p.created_at, p.id), reverse=True)
        return ordered[opt.offset: opt.offset + opt.limit]

    async def count(self) -> int:
        self.calls.append("count")
        return len(self.posts)


class FakeBlobStore:
    def __init__(self):
        self.objects: Dict[str, StoredObject] = {}
        self.removed: List[str] = []
        self.fail_remove = False

    async def store(self, data: bytes, content_type: str, filename: str) -> str:
        if content_type not in ALLOWED_MIME_TYPES:
            raise ErrUnsupportedMediaType(content_type)
        path = f"{PUBLIC_PATH_PREFIX}{uuid.uuid4().hex}_{filename}"
        self.objects[path] = StoredObject(path=path, data=data, content_type=content_type)
        return path

    async def remove(self, path: str) -> None:
        if self.fail_remove:
            raise RuntimeError(f"cannot remove {path}")
        self.removed.append(path)
        self.objects.pop(path, None)

    async def open(self, path: str) -> StoredObject:
        from pkg.minio.minio import MinioObjectNotFoundError

        if path not in self.objects:
            raise MinioObjectNotFoundError(path)
        return self.objects[path]


class RecordingNotifier:
    def __init__(self):
        self.events = []

    def publish(self, event) -> None:
        self.events.append(event)


@pytest.fixture
def logger():
    return Logger(LoggerConfig(level="DEBUG", enable_console=False))


@pytest.fixture
def user_repo():
    return FakeUserRepository()


@pytest.fixture
def post_repo(user_repo):
    return FakePostRepository(user_repo)


@pytest.fixture
def blob_store():
    return FakeBlobStore()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def post_usecase(post_repo, user_repo, blob_store, notifier, logger):
    return NewPostUseCase(
        repository=post_repo,
        user_repository=user_repo,
        blob_store=blob_store,
        notifier=notifier,
        logger=logger,
        config=PostConfig(per_page=2),
    )


@pytest.fixture
def token_service():
    return JWTManager(JWTConfig(secret=TEST_SECRET))


@pytest.fixture
def hasher():
    # Lowest cost bcrypt accepts, keeps the suite fast
    return BcryptHasher(BcryptConfig(rounds=4))


@pytest.fixture
def auth_usecase(token_service, logger):
    return NewAuthUseCase(token_service, logger)


@pytest.fixture
def user_usecase(user_repo, hasher, token_service, logger):
    return NewUserUseCase(user_repo, hasher, token_service, logger)


@pytest.fixture
def alice(user_repo):
    return user_repo.add_user("Alice")


@pytest.fixture
def bob(user_repo):
    return user_repo.add_user("Bob")


@pytest.fixture
def anonymous():
    return AuthContext.anonymous()


def auth_for(user: User) -> AuthContext:
    return AuthContext.authenticated(user.id)


@pytest.fixture
def as_user():
    return auth_for
