"""Cache-aside layer over individual movies.

Each public operation performs exactly one aggregate invalidation through
the InvalidationCoordinator, then its own store operation. A cache hit on
``get`` is served directly and touches neither the backend nor the
aggregate slot.

Entries never expire. An entry written here stays until an explicit evict
or clear, each of which invalidates the aggregate first.
"""

from __future__ import annotations

import logging

from moviecache.cache.invalidation import InvalidationCoordinator, InvalidationReason
from moviecache.cache.keys import CacheKeys
from moviecache.cache.serialization import decode_movie, encode_movie
from moviecache.cache.store import KeyValueStore
from moviecache.core.backend import MovieBackend
from moviecache.core.errors import BackendUnavailable
from moviecache.core.model import Movie
from moviecache.observability.metrics import (
    record_backend_fetch,
    record_cache_hit,
    record_cache_miss,
)

logger = logging.getLogger(__name__)

CACHE_TYPE = "movie"


class MovieCache:
    """Movies cached by identifier, read through to a backend on a miss."""

    def __init__(
        self,
        store: KeyValueStore,
        backend: MovieBackend,
        invalidation: InvalidationCoordinator,
    ):
        self.store = store
        self.backend = backend
        self.invalidation = invalidation

    async def get(self, movie_id: int) -> Movie | None:
        """Get a movie, fetching it from the backend on a miss.

        Returns None when the backend has no such movie; nothing is cached
        in that case.

        Raises:
            BackendUnavailable: the backend lookup failed
            StoreError: the store failed or held malformed data
        """
        key = CacheKeys.movie(movie_id)
        cached = await self.store.get(key)
        if cached is not None:
            record_cache_hit(CACHE_TYPE)
            return decode_movie(key, cached)

        record_cache_miss(CACHE_TYPE)
        await self.invalidation.invalidate_aggregate(InvalidationReason.MISS)
        logger.info(
            f"Get movie by id: {movie_id}",
            extra={"cache_type": CACHE_TYPE, "movie_id": movie_id},
        )

        try:
            movie = await self.backend.fetch(movie_id)
        except Exception as e:
            record_backend_fetch("error")
            raise BackendUnavailable(movie_id, str(e)) from e

        if movie is None:
            record_backend_fetch("absent")
            return None

        record_backend_fetch("found")
        await self.store.set(key, encode_movie(movie))
        return movie

    async def put(self, movie: Movie) -> Movie:
        """Store a movie, replacing any cached value for its identifier."""
        await self.invalidation.invalidate_aggregate(InvalidationReason.PUT)
        logger.info(
            f"Adding movie {movie} to {CACHE_TYPE} cache",
            extra={"cache_type": CACHE_TYPE, "movie_id": movie.id},
        )
        await self.store.set(CacheKeys.movie(movie.id), encode_movie(movie))
        return movie

    async def evict(self, movie_id: int) -> None:
        """Remove a single movie. Evicting an absent movie is a no-op."""
        await self.invalidation.invalidate_aggregate(InvalidationReason.EVICT)
        logger.info(
            f"Clean entry {movie_id} for {CACHE_TYPE} cache",
            extra={"cache_type": CACHE_TYPE, "movie_id": movie_id},
        )
        await self.store.delete(CacheKeys.movie(movie_id))

    async def clear(self) -> int:
        """Remove every cached movie. Returns the number removed."""
        await self.invalidation.invalidate_aggregate(InvalidationReason.CLEAR)
        logger.info(f"Clean all entries for {CACHE_TYPE} cache", extra={"cache_type": CACHE_TYPE})
        return await self.store.delete_prefix(CacheKeys.movie_prefix())
