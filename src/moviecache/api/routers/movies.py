"""Movie cache endpoints.

Thin request/response mapping over MovieService:
- GET    /movies              - list all cached movies
- GET    /movies/{id}         - get a movie (read-through)
- POST   /movies              - add or replace a cached movie
- DELETE /movies/cache        - clear the whole movie cache
- DELETE /movies/{id}/cache   - evict one movie
"""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import Response

from moviecache.api.deps import MovieServiceDep
from moviecache.core.errors import NotFound
from moviecache.core.model import Movie

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=list[Movie])
async def list_movies(service: MovieServiceDep) -> list[Movie]:
    """List every cached movie."""
    return await service.list_all()


@router.get("/{movie_id}", response_model=Movie)
async def get_movie(movie_id: int, service: MovieServiceDep) -> Movie:
    """Get a movie by identifier."""
    movie = await service.get(movie_id)
    if movie is None:
        raise NotFound(movie_id)
    return movie


@router.post("", response_model=Movie)
async def add_movie(movie: Movie, service: MovieServiceDep) -> Movie:
    """Add a movie to the cache, replacing any cached value for its identifier."""
    return await service.put(movie)


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cache(service: MovieServiceDep) -> Response:
    """Clear every cached movie."""
    await service.clear_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{movie_id}/cache", status_code=status.HTTP_204_NO_CONTENT)
async def evict_movie(movie_id: int, service: MovieServiceDep) -> Response:
    """Evict one movie from the cache."""
    await service.evict(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
