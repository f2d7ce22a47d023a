"""Public operations of the movie cache.

MovieService is the composition root for the two cache tiers. It is built
once with an explicit store and backend; nothing is looked up from a
process-wide registry.

Example:
    store = InMemoryStore()
    service = MovieService.create(store, StubMovieBackend())

    movie = await service.get(15)
    movies = await service.list_all()
"""

from __future__ import annotations

from moviecache.cache.aggregate import AllMoviesCache
from moviecache.cache.entity import MovieCache
from moviecache.cache.invalidation import InvalidationCoordinator
from moviecache.cache.store import KeyValueStore
from moviecache.core.backend import MovieBackend
from moviecache.core.model import Movie


class MovieService:
    """Movie cache operations consumed by the request layer."""

    def __init__(self, movies: MovieCache, all_movies: AllMoviesCache):
        self.movies = movies
        self.all_movies = all_movies

    @classmethod
    def create(cls, store: KeyValueStore, backend: MovieBackend) -> MovieService:
        """Wire both cache tiers over a shared store."""
        all_movies = AllMoviesCache(store)
        invalidation = InvalidationCoordinator(all_movies)
        movies = MovieCache(store, backend, invalidation)
        return cls(movies, all_movies)

    async def list_all(self) -> list[Movie]:
        """All cached movies, in no particular order."""
        return await self.all_movies.get_all()

    async def get(self, movie_id: int) -> Movie | None:
        """A single movie, read through to the backend on a miss."""
        return await self.movies.get(movie_id)

    async def put(self, movie: Movie) -> Movie:
        """Cache a movie, overwriting any previous value."""
        return await self.movies.put(movie)

    async def clear_all(self) -> None:
        """Drop every cached movie."""
        await self.movies.clear()

    async def evict(self, movie_id: int) -> None:
        """Drop one cached movie."""
        await self.movies.evict(movie_id)
