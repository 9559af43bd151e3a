"""Maps AppError kinds to JSON responses."""

from fastapi import FastAPI, Request  # type: ignore
from fastapi.exceptions import RequestValidationError  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from core.errors import AppError, ErrInternal, ErrValidationFailed
from core.validation import FieldError


def _error_body(exc: AppError):
    return {"message": exc.message, "status": exc.status_code, "data": exc.data}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            FieldError(field=".".join(str(p) for p in err.get("loc", ())[1:]) or "body", message=err.get("msg", ""))
            for err in exc.errors()
        ]
        wrapped = ErrValidationFailed(errors)
        return JSONResponse(status_code=wrapped.status_code, content=_error_body(wrapped))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        deps = getattr(request.app.state, "deps", None)
        if deps is not None:
            deps.logger.exception(f"internal.httpserver.errors: unhandled {request.method} {request.url.path}: {exc}")
        wrapped = ErrInternal()
        return JSONResponse(status_code=wrapped.status_code, content=_error_body(wrapped))


__all__ = ["register_error_handlers"]
