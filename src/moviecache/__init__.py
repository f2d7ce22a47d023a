"""movie-cache: two-tier Redis cache for movies with aggregate invalidation."""

from moviecache.core import BackendUnavailable, Movie, MovieBackend, StoreError
from moviecache.service import MovieService

__version__ = "0.1.0"

__all__ = [
    "Movie",
    "MovieBackend",
    "MovieService",
    "StoreError",
    "BackendUnavailable",
    "__version__",
]
