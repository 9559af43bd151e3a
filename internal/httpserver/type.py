from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IBlobStore
from internal.auth.interface import IAuthUseCase
from internal.notifier.hub import Hub
from internal.post.interface import IPostUseCase
from internal.user.interface import IUserUseCase


@dataclass
class Dependencies:
    """Everything the handlers need, built once at startup and kept on app.state."""

    logger: Logger
    auth: IAuthUseCase
    user: IUserUseCase
    post: IPostUseCase
    blob_store: IBlobStore
    hub: Hub
    # Extra async health probes keyed by name (database, redis)
    health_checks: Dict[str, Callable[[], Awaitable[bool]]] = field(default_factory=dict)
    # Awaited in reverse order on shutdown
    closers: List[Callable[[], Any]] = field(default_factory=list)
    service_name: Optional[str] = None


__all__ = ["Dependencies"]
