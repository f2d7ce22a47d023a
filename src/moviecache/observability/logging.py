"""Structured logging for movie-cache.

The cache tiers log each operation with a fixed set of structured fields
passed through ``extra=``:

- ``cache_type``: which tier logged (``movie`` or ``all_movies``)
- ``movie_id``: the movie an entity operation touched
- ``reason``: why the aggregate was invalidated (miss, put, evict, clear)

Both formatters render those fields, plus the id of the HTTP request being
served when there is one.

Usage:
    from moviecache.observability.logging import configure_logging

    configure_logging(json_format=True, level="INFO")

    logger = logging.getLogger(__name__)
    logger.info("Get movie by id: 15", extra={"cache_type": "movie", "movie_id": 15})
"""

from __future__ import annotations

import contextvars
import logging
import sys
from datetime import datetime, timezone
from typing import Any

import orjson

# Set by RequestIdMiddleware for the duration of one HTTP request
request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="")

# Structured fields the cache layers attach to their records, in render order
CACHE_FIELDS = ("cache_type", "movie_id", "reason")


def cache_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the cache fields present on ``record``."""
    return {
        name: getattr(record, name)
        for name in CACHE_FIELDS
        if getattr(record, name, None) is not None
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Example:
    {"timestamp": "2026-01-10T12:34:56.789+00:00", "level": "INFO",
     "logger": "moviecache.cache.invalidation",
     "message": "Clear all entries for all_movies cache",
     "cache_type": "all_movies", "reason": "put", "request_id": "abc-123"}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(cache_fields(record))

        request_id = request_id_var.get()
        if request_id:
            log_data["request_id"] = request_id

        if record.exc_info:
            exc_type, exc, _ = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc) if exc else None,
                "traceback": self.formatException(record.exc_info),
            }

        return orjson.dumps(log_data, default=str).decode()


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for development.

    2026-01-10 12:34:56 | INFO     | moviecache.cache.entity | Clean entry 15 for movie cache | cache_type=movie movie_id=15 req=abc-123
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = f"{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}"

        context = [f"{name}={value}" for name, value in cache_fields(record).items()]
        request_id = request_id_var.get()
        if request_id:
            context.append(f"req={request_id[:8]}")
        if context:
            line += " | " + " ".join(context)

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(json_format: bool = True, level: str = "INFO") -> None:
    """Install a single stderr handler on the root logger.

    Args:
        json_format: Use JSON lines (production) instead of console lines
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else ConsoleFormatter())
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
