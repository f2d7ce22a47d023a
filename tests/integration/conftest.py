"""Integration test fixtures using Docker.

Provides a containerized Redis for realistic testing. Tests are skipped
when no Docker daemon is reachable.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator, Iterator
from urllib.parse import urlparse

import pytest
import pytest_asyncio

from moviecache.cache.store import RedisStore


@pytest.fixture(scope="session")
def docker_client():  # type: ignore[no-untyped-def]
    """Create a Docker client or skip if Docker is unavailable."""
    docker = pytest.importorskip("docker")
    try:
        client = docker.from_env()
        client.ping()
    except Exception as exc:
        pytest.skip(f"Docker not available: {exc}")
    yield client
    client.close()


@pytest.fixture(scope="session")
def redis_url(docker_client) -> Iterator[str]:  # type: ignore[no-untyped-def]
    """Start a Redis container for the test session and yield its URL."""
    container = docker_client.containers.run(
        "redis:7-alpine",
        detach=True,
        ports={"6379/tcp": None},
    )
    try:
        base_url = docker_client.api.base_url
        if base_url.startswith(("unix://", "npipe://", "http+docker://")):
            host = "localhost"
        else:
            host = urlparse(base_url).hostname or "localhost"

        container.reload()
        port = int(container.attrs["NetworkSettings"]["Ports"]["6379/tcp"][0]["HostPort"])
        yield f"redis://{host}:{port}/0"
    finally:
        container.remove(force=True, v=True)


@pytest_asyncio.fixture
async def redis_store(redis_url: str) -> AsyncIterator[RedisStore]:
    """RedisStore against the container, flushed after each test."""
    import redis.asyncio as redis

    client = redis.from_url(redis_url)
    await _wait_for_redis(client)
    yield RedisStore(client)
    await client.flushdb()
    await client.aclose()


async def _wait_for_redis(client, timeout: float = 30.0) -> None:  # type: ignore[no-untyped-def]
    """Wait for Redis to accept connections."""
    deadline = time.monotonic() + timeout
    while True:
        try:
            await client.ping()
            return
        except Exception:
            if time.monotonic() > deadline:
                raise
            await asyncio.sleep(0.5)
