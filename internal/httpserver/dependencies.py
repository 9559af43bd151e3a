"""FastAPI dependencies resolving per-request collaborators from app.state."""

from typing import Optional

from fastapi import Depends, Header, Request  # type: ignore

from internal.auth.type import AuthContext
from .type import Dependencies


def get_deps(request: Request) -> Dependencies:
    return request.app.state.deps


def get_auth_context(
    authorization: Optional[str] = Header(default=None),
    deps: Dependencies = Depends(get_deps),
) -> AuthContext:
    """Never rejects: a missing or bad token yields an anonymous context."""
    return deps.auth.authenticate_header(authorization)


__all__ = ["get_deps", "get_auth_context"]
