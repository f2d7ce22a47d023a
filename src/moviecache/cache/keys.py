"""Cache key schema for movie-cache.

Key format:
- movie:{id}    one entry per cached movie
- all_movies    single slot holding the materialized list of all movies

The aggregate slot deliberately does not share the ``movie:`` prefix, so a
prefix scan of the entity key space never returns it.
"""

from __future__ import annotations


class CacheKeys:
    """Cache key generator following consistent naming convention."""

    MOVIE_PREFIX = "movie"
    ALL_MOVIES = "all_movies"

    @classmethod
    def movie(cls, movie_id: int) -> str:
        """Key for a single cached movie."""
        return f"{cls.MOVIE_PREFIX}:{movie_id}"

    @classmethod
    def movie_prefix(cls) -> str:
        """Prefix shared by every movie key.

        Use with scan/delete_prefix to enumerate or clear the entity cache.
        """
        return f"{cls.MOVIE_PREFIX}:"

    @classmethod
    def all_movies(cls) -> str:
        """Key for the aggregate slot."""
        return cls.ALL_MOVIES

    @classmethod
    def parse_movie_id(cls, key: str) -> int | None:
        """Extract the movie identifier from a movie key.

        Returns None if the key doesn't match the expected format.
        """
        prefix, sep, raw_id = key.partition(":")
        if not sep or prefix != cls.MOVIE_PREFIX:
            return None
        try:
            return int(raw_id)
        except ValueError:
            return None
