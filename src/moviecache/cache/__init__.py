"""Cache layer for movie-cache.

Two tiers over one key-value store, using the cache-aside pattern:
- MovieCache stores movies by identifier and reads through to the backend
- AllMoviesCache holds the derived list of all cached movies
- InvalidationCoordinator drops the aggregate whenever the movie tier
  misses or changes
"""

from moviecache.cache.aggregate import AllMoviesCache
from moviecache.cache.entity import MovieCache
from moviecache.cache.invalidation import InvalidationCoordinator, InvalidationReason
from moviecache.cache.keys import CacheKeys
from moviecache.cache.store import InMemoryStore, KeyValueStore, RedisStore, create_store

__all__ = [
    # Store adapters
    "KeyValueStore",
    "RedisStore",
    "InMemoryStore",
    "create_store",
    # Cache tiers
    "CacheKeys",
    "MovieCache",
    "AllMoviesCache",
    # Invalidation
    "InvalidationCoordinator",
    "InvalidationReason",
]
