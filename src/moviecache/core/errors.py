"""Error taxonomy for the cache core.

StoreError and BackendUnavailable propagate unchanged to callers of the
public operations. NotFound is an internal signal: absence is a valid
result (None or an empty list), never a failure of a cache operation.
"""

from __future__ import annotations


class MovieCacheError(Exception):
    """Base class for movie-cache errors."""


class StoreError(MovieCacheError):
    """The key-value store is unreachable or returned malformed data."""

    def __init__(self, operation: str, key: str, reason: str):
        self.operation = operation
        self.key = key
        self.reason = reason
        super().__init__(f"Store {operation} failed for '{key}': {reason}")


class BackendUnavailable(MovieCacheError):
    """The backend collaborator failed or timed out."""

    def __init__(self, movie_id: int, reason: str):
        self.movie_id = movie_id
        self.reason = reason
        super().__init__(f"Backend lookup failed for movie {movie_id}: {reason}")


class NotFound(MovieCacheError):
    """No movie exists for the identifier."""

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        super().__init__(f"Movie with identifier '{movie_id}' not found")
