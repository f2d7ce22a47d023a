"""API routers for movie-cache."""

from moviecache.api.routers import health, metrics, movies

__all__ = ["health", "metrics", "movies"]
