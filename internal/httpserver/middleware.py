import time
import uuid

from fastapi import FastAPI, Request  # type: ignore

from .constant import REQUEST_ID_HEADER


def register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind a request id for logging, echo it back and log the exchange."""
        deps = request.app.state.deps
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        with deps.logger.request_context(request_id):
            start = time.perf_counter()
            deps.logger.info(f"internal.httpserver.request: {request.method} {request.url.path}")

            response = await call_next(request)

            duration = (time.perf_counter() - start) * 1000
            deps.logger.info(f"internal.httpserver.response: {response.status_code} ({duration:.1f}ms)")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


__all__ = ["register_middleware"]
