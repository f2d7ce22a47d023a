"""Tests for the Movie model."""

from datetime import date

import pytest
from pydantic import ValidationError

from moviecache.core.model import Movie


class TestMovie:
    """Tests for Movie."""

    def test_string_form(self) -> None:
        """str() renders id, quoted title and ISO date."""
        movie = Movie(id=15, title="Title", release_date=date(2020, 1, 1))
        assert str(movie) == '{ id=15, title="Title", release_date=2020-01-01 }'

    def test_parses_iso_date(self) -> None:
        """Release dates are accepted as ISO strings."""
        movie = Movie.model_validate({"id": 1, "title": "A", "release_date": "1999-12-31"})
        assert movie.release_date == date(1999, 12, 31)

    def test_is_immutable(self) -> None:
        """Movies cannot be modified after construction."""
        movie = Movie(id=15, title="Title", release_date=date(2020, 1, 1))
        with pytest.raises(ValidationError):
            movie.title = "Changed"  # type: ignore[misc]

    def test_rejects_unknown_fields(self) -> None:
        """Unexpected fields are rejected."""
        with pytest.raises(ValidationError):
            Movie.model_validate(
                {"id": 1, "title": "A", "release_date": "2020-01-01", "rating": 5}
            )

    def test_equality_by_value(self) -> None:
        """Movies with the same fields are equal."""
        a = Movie(id=1, title="A", release_date=date(2020, 1, 1))
        b = Movie(id=1, title="A", release_date=date(2020, 1, 1))
        assert a == b
