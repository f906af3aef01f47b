"""Structured logging helpers for tle-parser."""

from __future__ import annotations

import contextlib
import contextvars
import datetime as _dt
import enum
import json
import logging
import os
import sys
from typing import Any, Dict, Mapping, Optional

_LOGGER_NAME = "tle_parser"
_CONTEXT: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    "tle_parser_log_context", default={}
)
# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def _resolve_level(level: Optional[str | int]) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = os.getenv("TLE_PARSER_LOG_LEVEL", "INFO")
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.INFO


class JSONFormatter(logging.Formatter):
    """Render log records as one JSON object per line.

    Bound :func:`log_context` values land under ``context`` and ``extra=``
    values under ``extra``; both are flattened by :func:`_plain`.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": _dt.datetime.now(_dt.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = _CONTEXT.get()
        if context:
            payload["context"] = _plain(context)
        extras = {k: v for k, v in vars(record).items() if k not in _RECORD_FIELDS}
        if extras:
            payload["extra"] = _plain(extras)
        return json.dumps(payload, default=repr)


def _plain(value: Any) -> Any:
    """Turn TLE bytes and enums into JSON friendly values."""

    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_plain(item) for item in value]
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("ascii", errors="replace")
    return value


def configure_logging(
    level: Optional[str | int] = None,
    stream: Optional[Any] = None,
    force: bool = False,
) -> logging.Logger:
    """Configure the package logger with JSON output."""

    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers and not force:
        return logger
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child logger using the configured JSON handler."""

    if not name:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


@contextlib.contextmanager
def log_context(**kwargs: Any):
    """Bind metadata to every log emitted inside the block; ``None`` values are dropped."""

    current = dict(_CONTEXT.get())
    current.update({k: v for k, v in kwargs.items() if v is not None})
    token = _CONTEXT.set(current)
    try:
        yield
    finally:
        _CONTEXT.reset(token)
