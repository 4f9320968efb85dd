"""Structured logging for the Movies API.

Application code logs through ``logger`` (a loguru proxy). Records emitted by
libraries through the standard ``logging`` module (uvicorn, pymongo) are
intercepted and forwarded to loguru, so everything shares one format and
carries the request correlation id.
"""
import logging
import sys
import time
import uuid
from contextvars import ContextVar

from fastapi import FastAPI, Request
from loguru import logger as _logger

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")


class _InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)
        _logger.bind(correlation_id=_CORRELATION_ID.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class ContextualLogger:
    """Proxy for loguru that injects the current correlation id."""

    def __getattr__(self, name):
        bound = _logger.bind(correlation_id=_CORRELATION_ID.get())
        return getattr(bound, name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")


def setup_logging(level: str = "INFO") -> None:
    """Install the loguru stderr sink and intercept stdlib logging.

    Args:
        level (str): Minimum level name, e.g. "INFO" or "DEBUG".
    """
    level = level.upper()

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-"})
    _logger.add(
        sys.stderr,
        level=level,
        format=_FMT,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = [_InterceptHandler()]
        logging.getLogger(name).propagate = False
    logging.getLogger("pymongo").setLevel(logging.WARNING)


def bind_fastapi(app: FastAPI) -> None:
    """Attach the request logging middleware to the application.

    Each request gets a correlation id taken from ``X-Request-ID`` or freshly
    generated; it is echoed back in the response headers.

    Args:
        app (FastAPI): The application to instrument.
    """

    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        started = time.perf_counter()
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        set_correlation_id(request_id)
        try:
            response = await call_next(request)
            elapsed = (time.perf_counter() - started) * 1000.0
            logger.info(
                f"{request.method} {request.url.path} -> "
                f"{response.status_code} in {elapsed:.1f} ms"
            )
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            clear_correlation_id()


logger = ContextualLogger()
