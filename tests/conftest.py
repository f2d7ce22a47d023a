"""Global pytest fixtures for movie-cache tests."""

from __future__ import annotations

import pytest

from moviecache.cache.aggregate import AllMoviesCache
from moviecache.cache.entity import MovieCache
from moviecache.cache.invalidation import InvalidationCoordinator
from moviecache.service import MovieService
from tests.fakes import RecordingBackend, RecordingStore, make_movie


@pytest.fixture
def store() -> RecordingStore:
    """Empty recording in-memory store."""
    return RecordingStore()


@pytest.fixture
def backend() -> RecordingBackend:
    """Backend that knows movie 15 ("Title", 2020-01-01)."""
    return RecordingBackend({15: make_movie(15)})


@pytest.fixture
def all_movies(store: RecordingStore) -> AllMoviesCache:
    """Aggregate cache over the shared store."""
    return AllMoviesCache(store)


@pytest.fixture
def invalidation(all_movies: AllMoviesCache) -> InvalidationCoordinator:
    """Coordinator bound to the aggregate cache."""
    return InvalidationCoordinator(all_movies)


@pytest.fixture
def movies(
    store: RecordingStore,
    backend: RecordingBackend,
    invalidation: InvalidationCoordinator,
) -> MovieCache:
    """Movie cache over the shared store."""
    return MovieCache(store, backend, invalidation)


@pytest.fixture
def service(movies: MovieCache, all_movies: AllMoviesCache) -> MovieService:
    """MovieService over the shared fixtures."""
    return MovieService(movies, all_movies)
