"""FastAPI application assembly."""

from typing import List, Optional

from fastapi import FastAPI  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore

from .constant import API_DESCRIPTION, API_TITLE, API_VERSION, CORS_HEADERS, CORS_METHODS
from .errors import register_error_handlers
from .middleware import register_middleware


def build_app(lifespan=None, cors_origins: Optional[List[str]] = None) -> FastAPI:
    """Create the app with every route registered.

    ``app.state.deps`` must hold a Dependencies instance before the first
    request, either set by the lifespan or directly by the caller.
    """
    from internal.image.delivery.http import router as image_router
    from internal.notifier.delivery.websocket import router as socket_router
    from internal.post.delivery.http import router as post_router
    from internal.user.delivery.http import router as user_router
    from .health import router as health_router

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        docs_url="/swagger/index.html",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )
    register_middleware(app)
    register_error_handlers(app)

    app.include_router(user_router, tags=["auth"])
    app.include_router(post_router, tags=["feed"])
    app.include_router(image_router, tags=["images"])
    app.include_router(socket_router, tags=["socket"])
    app.include_router(health_router, tags=["health"])

    return app


__all__ = ["build_app"]
