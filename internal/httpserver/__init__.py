"""HTTP transport: app assembly, error mapping and request dependencies."""

from .type import Dependencies
from .server import build_app

__all__ = ["Dependencies", "build_app"]
