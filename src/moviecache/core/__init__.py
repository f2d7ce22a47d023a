"""Core domain types for movie-cache."""

from moviecache.core.backend import MovieBackend, StubMovieBackend
from moviecache.core.errors import BackendUnavailable, MovieCacheError, NotFound, StoreError
from moviecache.core.model import Movie

__all__ = [
    "Movie",
    "MovieBackend",
    "StubMovieBackend",
    "MovieCacheError",
    "StoreError",
    "BackendUnavailable",
    "NotFound",
]
