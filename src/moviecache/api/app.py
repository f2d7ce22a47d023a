"""FastAPI application factory for movie-cache.

Creates the application with:
- Movie cache routers (/movies)
- Health probes and Prometheus metrics
- Lifecycle management for the key-value store
- Consistent error responses for store and backend failures
- ORJSON for fast JSON serialization
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from starlette.types import ExceptionHandler

from moviecache import __version__
from moviecache.api.errors import ApiError, api_exception_handler, cache_exception_handler
from moviecache.api.middleware import RequestIdMiddleware
from moviecache.api.routers import health, metrics, movies
from moviecache.cache.store import KeyValueStore, create_store
from moviecache.config import settings
from moviecache.core.backend import MovieBackend, StubMovieBackend
from moviecache.core.errors import MovieCacheError
from moviecache.observability import configure_logging
from moviecache.observability.metrics import MetricsMiddleware, get_metrics
from moviecache.service import MovieService

logger = logging.getLogger(__name__)


def create_app(
    store: KeyValueStore | None = None,
    backend: MovieBackend | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Key-value store to use; built from settings when omitted
        backend: Movie source for cache misses; the stub backend when omitted
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle.

        On startup: configure logging, initialize metrics, build the store
        and the MovieService. On shutdown: close the store.
        """
        configure_logging(json_format=settings.use_json_logs, level=settings.log_level)
        get_metrics()

        logger.info(f"Starting {settings.app_name} ({settings.env})")
        app_store = store if store is not None else create_store(settings)
        app.state.store = app_store
        app.state.movie_service = MovieService.create(
            app_store, backend if backend is not None else StubMovieBackend()
        )
        logger.info(f"{settings.app_name} startup complete")

        yield

        logger.info(f"Shutting down {settings.app_name}")
        await app_store.close()
        logger.info(f"{settings.app_name} shutdown complete")

    app = FastAPI(
        title="movie-cache",
        description="Two-tier movie cache with aggregate invalidation",
        version=__version__,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    app.add_middleware(RequestIdMiddleware)
    if settings.enable_metrics:
        app.add_middleware(MetricsMiddleware)

    app.add_exception_handler(ApiError, cast(ExceptionHandler, api_exception_handler))
    app.add_exception_handler(MovieCacheError, cast(ExceptionHandler, cache_exception_handler))

    app.include_router(movies.router)
    app.include_router(health.router)
    app.include_router(metrics.router)

    return app
