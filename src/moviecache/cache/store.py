"""Key-value store adapters for movie-cache.

The cache layers only ever talk to a KeyValueStore: string keys, opaque
bytes values, and per-key atomic operations. Two implementations:
- RedisStore: production adapter over the redis-py async client
- InMemoryStore: single-process store for development and tests

Every store failure surfaces as StoreError.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import TYPE_CHECKING, cast

import redis.asyncio as redis
from redis.exceptions import RedisError

from moviecache.core.errors import StoreError

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from moviecache.config import Settings

logger = logging.getLogger(__name__)

# Characters with special meaning in Redis MATCH patterns
_GLOB_SPECIAL = "\\*?[]"


def _escape_glob(prefix: str) -> str:
    """Escape a literal prefix for use in a Redis MATCH pattern."""
    return "".join(f"\\{c}" if c in _GLOB_SPECIAL else c for c in prefix)


class KeyValueStore(ABC):
    """Abstract key-value store."""

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """Get the value stored under ``key``, or None if absent."""
        ...

    @abstractmethod
    async def set(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key`` with no expiry, overwriting any previous value."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete ``key``. Returns False if it did not exist."""
        ...

    @abstractmethod
    async def scan(self, prefix: str) -> list[str]:
        """List every key starting with ``prefix`` (order undefined)."""
        ...

    @abstractmethod
    async def delete_prefix(self, prefix: str) -> int:
        """Delete every key starting with ``prefix``. Returns the count deleted."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Check store connectivity."""
        ...

    async def close(self) -> None:
        """Release connections held by the store."""
        return None


class RedisStore(KeyValueStore):
    """KeyValueStore backed by Redis.

    Uses SCAN rather than KEYS so enumerating the key space never blocks
    the server on large keyspaces.
    """

    def __init__(self, client: Redis):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> RedisStore:
        """Create a store with its own connection pool."""
        client = redis.from_url(  # type: ignore[no-untyped-call]
            settings.redis_url,
            decode_responses=False,  # values are opaque bytes
            socket_timeout=settings.redis_socket_timeout,
            socket_connect_timeout=settings.redis_socket_timeout,
        )
        return cls(client)

    async def get(self, key: str) -> bytes | None:
        try:
            return cast(bytes | None, await self.client.get(key))
        except RedisError as e:
            raise StoreError("get", key, str(e)) from e

    async def set(self, key: str, value: bytes) -> None:
        try:
            await self.client.set(key, value)
        except RedisError as e:
            raise StoreError("set", key, str(e)) from e

    async def delete(self, key: str) -> bool:
        try:
            deleted = await self.client.delete(key)
        except RedisError as e:
            raise StoreError("delete", key, str(e)) from e
        return bool(deleted)

    async def scan(self, prefix: str) -> list[str]:
        pattern = f"{_escape_glob(prefix)}*"
        keys: list[str] = []
        try:
            async for key in self.client.scan_iter(match=pattern):
                keys.append(key.decode() if isinstance(key, bytes) else key)
        except RedisError as e:
            raise StoreError("scan", pattern, str(e)) from e
        return keys

    async def delete_prefix(self, prefix: str) -> int:
        keys = await self.scan(prefix)
        if not keys:
            return 0
        try:
            return int(await self.client.delete(*keys))
        except RedisError as e:
            raise StoreError("delete", f"{prefix}*", str(e)) from e

    async def ping(self) -> bool:
        try:
            await cast(Awaitable[bool], self.client.ping())
            return True
        except Exception:
            return False

    async def close(self) -> None:
        await self.client.aclose()


class InMemoryStore(KeyValueStore):
    """KeyValueStore held in a process-local dict.

    Suitable for single-instance deployments and tests. Each operation
    completes without suspending, so operations are atomic per key within
    one event loop.
    """

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    async def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    async def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def scan(self, prefix: str) -> list[str]:
        return [k for k in self._data if k.startswith(prefix)]

    async def delete_prefix(self, prefix: str) -> int:
        keys = await self.scan(prefix)
        for key in keys:
            del self._data[key]
        return len(keys)

    async def ping(self) -> bool:
        return True


def create_store(settings: Settings) -> KeyValueStore:
    """Create the key-value store selected by ``settings.store_backend``."""
    if settings.store_backend == "redis":
        logger.info(f"Using Redis store at {settings.redis_url}")
        return RedisStore.from_settings(settings)
    if settings.store_backend == "memory":
        logger.info("Using in-memory store")
        return InMemoryStore()
    raise ValueError(f"Unknown store backend: {settings.store_backend}")
