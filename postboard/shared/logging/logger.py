"""Loguru setup shared by the app, its middleware and the tests.

Every record carries the current request's correlation id. Messages pass
through :func:`sanitize_record` before reaching a sink so that tokens,
passwords and e-mail local parts never land in a log file.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_NO_REQUEST = "-"
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default=_NO_REQUEST)

_LINE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}:{function}:{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

# (logger name, level) for chatty stdlib loggers routed into loguru
_STDLIB_LEVELS = (
    ("werkzeug", logging.INFO),
    ("sqlalchemy.engine", logging.WARNING),
    ("flask_cors", logging.WARNING),
)


def _log_file() -> Path:
    configured = os.getenv("LOG_FILE")
    path = Path(configured) if configured else Path.cwd() / "instance" / "app.log"
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


class _InterceptHandler(logging.Handler):
    """Forwards stdlib ``logging`` records (werkzeug, SQLAlchemy) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(correlation_id=_correlation_id.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class ContextualLogger:
    """Drop-in for ``loguru.logger`` that binds the active correlation id."""

    def __getattr__(self, name: str) -> Any:
        return getattr(_logger.bind(correlation_id=_correlation_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or _NO_REQUEST)


def clear_correlation_id() -> None:
    _correlation_id.set(_NO_REQUEST)


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    level = (level or os.getenv("LOG_LEVEL") or ("DEBUG" if debug_mode else "INFO")).upper()

    _logger.remove()
    _logger.configure(extra={"correlation_id": _NO_REQUEST}, patcher=sanitize_record)
    sink_options: dict[str, Any] = {
        "level": level,
        "format": _LINE_FORMAT,
        "backtrace": debug_mode,
        "diagnose": False,
    }
    _logger.add(sys.stderr, colorize=True, **sink_options)
    _logger.add(
        _log_file(),
        colorize=False,
        enqueue=True,
        rotation="10 MB",
        retention=3,
        encoding="utf-8",
        **sink_options,
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, stdlib_level in _STDLIB_LEVELS:
        logging.getLogger(name).setLevel(stdlib_level)


logger = ContextualLogger()

__all__ = [
    "clear_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
