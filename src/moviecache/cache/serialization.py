"""Byte encoding of cached movies.

Uses orjson for compact JSON. Decoding failures surface as StoreError since
the only source of these bytes is the key-value store.
"""

from __future__ import annotations

from collections.abc import Sequence

import orjson
from pydantic import ValidationError

from moviecache.core.errors import StoreError
from moviecache.core.model import Movie


def encode_movie(movie: Movie) -> bytes:
    """Serialize a movie to JSON bytes."""
    return orjson.dumps(movie.model_dump(mode="json"))


def decode_movie(key: str, data: bytes) -> Movie:
    """Deserialize a movie stored under ``key``."""
    try:
        return Movie.model_validate(orjson.loads(data))
    except (orjson.JSONDecodeError, ValidationError) as e:
        raise StoreError("decode", key, str(e)) from e


def encode_movies(movies: Sequence[Movie]) -> bytes:
    """Serialize a list of movies to a JSON array."""
    return orjson.dumps([movie.model_dump(mode="json") for movie in movies])


def decode_movies(key: str, data: bytes) -> list[Movie]:
    """Deserialize a JSON array of movies stored under ``key``."""
    try:
        parsed = orjson.loads(data)
        if not isinstance(parsed, list):
            raise StoreError("decode", key, "expected a JSON array")
        return [Movie.model_validate(item) for item in parsed]
    except (orjson.JSONDecodeError, ValidationError) as e:
        raise StoreError("decode", key, str(e)) from e
