import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Protocol, runtime_checkable

from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# One value per request; contextvars keep it isolated across asyncio tasks
_request_id_var: ContextVar[Optional[str]] = ContextVar(REQUEST_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def request_context(self, request_id: Optional[str] = None) -> Iterator[None]: ...

    def set_request_id(self, request_id: Optional[str]) -> None: ...

    def get_request_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """Loguru wrapper that stamps every record with the current request id.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))

        with logger.request_context("0b5e..."):
            logger.info("internal.post.usecase.create: post stored")
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger.bind(**{SERVICE_KEY: config.service_name})

        # Drop loguru's default stderr sink so only configured sinks remain
        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        def stamp_request(record):
            record["extra"][REQUEST_ID_KEY] = _request_id_var.get() or "-"
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_REQUEST} | "
            f"{LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"
        )

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=stamp_request,
        )

    @contextmanager
    def request_context(self, request_id: Optional[str] = None):
        """Bind a request id for the duration of the block."""
        token = _request_id_var.set(request_id)
        try:
            yield
        finally:
            _request_id_var.reset(token)

    def set_request_id(self, request_id: Optional[str]) -> None:
        _request_id_var.set(request_id)

    def get_request_id(self) -> Optional[str]:
        return _request_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).error(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log at ERROR level with the active exception's traceback."""
        self._loguru.opt(depth=1, exception=True).error(message, **kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
