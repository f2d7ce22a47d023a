"""Aggregate cache invalidation.

Every movie cache operation that can change the set of cached movies, and
every movie cache miss, calls into the InvalidationCoordinator before it
completes. The coordinator drops the aggregate slot so the next
``get_all`` rebuilds from the movie key space.

Invalidation happens eagerly, before the triggering store write or backend
lookup, and is not rolled back if that step later fails. Extra rebuilds are
accepted; a stale "all movies" view is not.
"""

from __future__ import annotations

import logging
from enum import Enum

from moviecache.cache.aggregate import CACHE_TYPE, AllMoviesCache
from moviecache.observability.metrics import record_invalidation

logger = logging.getLogger(__name__)


class InvalidationReason(str, Enum):
    """What triggered an aggregate invalidation."""

    MISS = "miss"
    PUT = "put"
    EVICT = "evict"
    CLEAR = "clear"


class InvalidationCoordinator:
    """Drops the aggregate slot on behalf of the movie cache."""

    def __init__(self, aggregate: AllMoviesCache):
        self.aggregate = aggregate

    async def invalidate_aggregate(self, reason: InvalidationReason) -> bool:
        """Invalidate the aggregate cache.

        Returns whether a cached aggregate was actually removed. Store
        failures propagate as StoreError.
        """
        logger.info(
            f"Clear all entries for {self.aggregate.key} cache",
            extra={"cache_type": CACHE_TYPE, "reason": reason.value},
        )
        removed = await self.aggregate.invalidate()
        record_invalidation(reason.value)
        return removed
