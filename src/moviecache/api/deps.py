"""Shared FastAPI dependencies for movie-cache routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from moviecache.cache.store import KeyValueStore
from moviecache.service import MovieService


def get_movie_service(request: Request) -> MovieService:
    """The MovieService built during application startup."""
    return request.app.state.movie_service


def get_store(request: Request) -> KeyValueStore:
    """The key-value store built during application startup."""
    return request.app.state.store


MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]
StoreDep = Annotated[KeyValueStore, Depends(get_store)]
