"""Backend collaborator consumed by the movie cache.

The backend is the source of truth the cache reads through to on a miss.
It is external to the cache core: the core only calls ``fetch`` and treats
any exception it raises as an opaque failure.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date

from moviecache.core.model import Movie

logger = logging.getLogger(__name__)


class MovieBackend(ABC):
    """Abstract source of movies."""

    @abstractmethod
    async def fetch(self, movie_id: int) -> Movie | None:
        """Look up a movie by identifier, returning None when it does not exist."""
        ...


class StubMovieBackend(MovieBackend):
    """Stand-in data source that knows every identifier.

    Every lookup returns a movie titled "Title" released on 2020-01-01,
    with the requested identifier. It never fails.
    """

    TITLE = "Title"
    RELEASE_DATE = date(2020, 1, 1)

    async def fetch(self, movie_id: int) -> Movie | None:
        logger.debug(f"Stub backend fetch for movie {movie_id}")
        return Movie(id=movie_id, title=self.TITLE, release_date=self.RELEASE_DATE)
