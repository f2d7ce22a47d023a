"""Aggregate cache holding the list of all cached movies.

The aggregate is derived, never written independently: on a miss it is
rebuilt by scanning the movie key space, so it always reflects the entity
cache at the moment of the rebuild. The slot is either absent or fully
present, and an empty rebuild is never stored.
"""

from __future__ import annotations

import logging

from moviecache.cache.keys import CacheKeys
from moviecache.cache.serialization import decode_movie, decode_movies, encode_movies
from moviecache.cache.store import KeyValueStore
from moviecache.core.model import Movie
from moviecache.observability.metrics import record_cache_hit, record_cache_miss

logger = logging.getLogger(__name__)

CACHE_TYPE = "all_movies"


class AllMoviesCache:
    """Single-slot cache for the materialized list of movies."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.key = CacheKeys.all_movies()

    async def get_all(self) -> list[Movie]:
        """Return every cached movie, rebuilding the slot on a miss."""
        cached = await self.store.get(self.key)
        if cached is not None:
            record_cache_hit(CACHE_TYPE)
            return decode_movies(self.key, cached)

        record_cache_miss(CACHE_TYPE)
        logger.info("Get all cached movies", extra={"cache_type": CACHE_TYPE})
        movies = await self._rebuild()

        # An empty result may be a transient snapshot taken during a clear
        if movies:
            await self.store.set(self.key, encode_movies(movies))
        return movies

    async def _rebuild(self) -> list[Movie]:
        movies: list[Movie] = []
        for key in await self.store.scan(CacheKeys.movie_prefix()):
            data = await self.store.get(key)
            if data is None:
                # Evicted between scan and get
                continue
            movies.append(decode_movie(key, data))
        return movies

    async def invalidate(self) -> bool:
        """Drop the aggregate slot.

        Idempotent. Returns False when there was nothing to invalidate.
        """
        removed = await self.store.delete(self.key)
        if not removed:
            logger.info(
                f"Cache {self.key} already empty, nothing to invalidate",
                extra={"cache_type": CACHE_TYPE},
            )
        return removed
