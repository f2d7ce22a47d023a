"""Movie value type.

Movies are immutable once constructed. Field names serialize in snake_case
and dates as ISO-8601 strings, so the JSON stored in the cache reads:

    {"id": 15, "title": "Title", "release_date": "2020-01-01"}
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict


class Movie(BaseModel):
    """A movie, identified by ``id``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    title: str
    release_date: date

    def __str__(self) -> str:
        return f'{{ id={self.id}, title="{self.title}", release_date={self.release_date} }}'
