"""Tests for structured logging."""

import json
import logging
import sys

from moviecache.observability.logging import (
    ConsoleFormatter,
    JsonFormatter,
    cache_fields,
    request_id_var,
)


def _record(message: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="moviecache.cache.entity",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestCacheFields:
    """Tests for cache_fields."""

    def test_only_cache_fields_collected(self) -> None:
        """Known cache fields are picked up; anything else is ignored."""
        record = _record("hello", movie_id=15, cache_type="movie", unrelated="x")
        assert cache_fields(record) == {"cache_type": "movie", "movie_id": 15}

    def test_plain_record(self) -> None:
        """A record without extras has no cache fields."""
        assert cache_fields(_record("hello")) == {}


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_basic_fields(self) -> None:
        """Output is one JSON object with the standard fields."""
        data = json.loads(JsonFormatter().format(_record("Get movie by id: 15")))

        assert data["level"] == "INFO"
        assert data["logger"] == "moviecache.cache.entity"
        assert data["message"] == "Get movie by id: 15"
        assert "timestamp" in data
        assert "request_id" not in data

    def test_entity_fields(self) -> None:
        """Movie id and cache type are emitted as their own keys."""
        record = _record("Clean entry 15 for movie cache", cache_type="movie", movie_id=15)
        data = json.loads(JsonFormatter().format(record))

        assert data["movie_id"] == 15
        assert data["cache_type"] == "movie"
        assert "reason" not in data

    def test_invalidation_reason(self) -> None:
        """The invalidation reason is emitted as a field."""
        record = _record(
            "Clear all entries for all_movies cache", cache_type="all_movies", reason="evict"
        )
        data = json.loads(JsonFormatter().format(record))
        assert data["reason"] == "evict"

    def test_includes_request_id(self) -> None:
        """The current request id is attached when set."""
        token = request_id_var.set("req-1")
        try:
            data = json.loads(JsonFormatter().format(_record("hello")))
        finally:
            request_id_var.reset(token)

        assert data["request_id"] == "req-1"

    def test_exception(self) -> None:
        """Exceptions are rendered with type and message."""
        try:
            raise ValueError("bad movie")
        except ValueError:
            record = _record("failed")
            record.exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "bad movie"


class TestConsoleFormatter:
    """Tests for ConsoleFormatter."""

    def test_format(self) -> None:
        """Console output carries logger name and message."""
        line = ConsoleFormatter().format(_record("Get all cached movies"))
        assert "moviecache.cache.entity" in line
        assert line.endswith("Get all cached movies")

    def test_cache_fields_appended(self) -> None:
        """Cache fields are rendered as key=value pairs."""
        record = _record("Adding movie 7", cache_type="movie", movie_id=7)
        line = ConsoleFormatter().format(record)
        assert line.endswith("| cache_type=movie movie_id=7")
