"""Tests for the invalidation coordinator."""

import logging
from unittest.mock import AsyncMock

import pytest

from moviecache.cache.aggregate import AllMoviesCache
from moviecache.cache.invalidation import InvalidationCoordinator, InvalidationReason


class TestInvalidationReason:
    """Tests for InvalidationReason enum."""

    def test_all_reasons_exist(self) -> None:
        """All expected reasons are defined."""
        assert InvalidationReason.MISS.value == "miss"
        assert InvalidationReason.PUT.value == "put"
        assert InvalidationReason.EVICT.value == "evict"
        assert InvalidationReason.CLEAR.value == "clear"


class TestInvalidationCoordinator:
    """Tests for InvalidationCoordinator."""

    @pytest.fixture
    def mock_aggregate(self) -> AsyncMock:
        """Create mock aggregate cache."""
        mock = AsyncMock(spec=AllMoviesCache)
        mock.key = "all_movies"
        mock.invalidate = AsyncMock(return_value=True)
        return mock

    @pytest.mark.asyncio
    async def test_delegates_to_aggregate(self, mock_aggregate: AsyncMock) -> None:
        """Each call invalidates the aggregate exactly once."""
        coordinator = InvalidationCoordinator(mock_aggregate)

        assert await coordinator.invalidate_aggregate(InvalidationReason.PUT) is True
        mock_aggregate.invalidate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reports_nothing_to_invalidate(self, mock_aggregate: AsyncMock) -> None:
        """An absent slot is reported as False, not an error."""
        mock_aggregate.invalidate.return_value = False
        coordinator = InvalidationCoordinator(mock_aggregate)

        assert await coordinator.invalidate_aggregate(InvalidationReason.MISS) is False

    @pytest.mark.asyncio
    async def test_logs_invalidation(
        self, mock_aggregate: AsyncMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Invalidation is logged with the slot name."""
        coordinator = InvalidationCoordinator(mock_aggregate)

        with caplog.at_level(logging.INFO, logger="moviecache.cache.invalidation"):
            await coordinator.invalidate_aggregate(InvalidationReason.CLEAR)

        assert "Clear all entries for all_movies cache" in caplog.text

    @pytest.mark.asyncio
    async def test_logs_reason_field(
        self, mock_aggregate: AsyncMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Each record carries the triggering reason."""
        coordinator = InvalidationCoordinator(mock_aggregate)

        with caplog.at_level(logging.INFO, logger="moviecache.cache.invalidation"):
            for reason in InvalidationReason:
                await coordinator.invalidate_aggregate(reason)

        assert [r.reason for r in caplog.records] == ["miss", "put", "evict", "clear"]
        assert {r.cache_type for r in caplog.records} == {"all_movies"}

    @pytest.mark.asyncio
    async def test_failure_propagates(self, mock_aggregate: AsyncMock) -> None:
        """Errors from the aggregate are not swallowed."""
        mock_aggregate.invalidate.side_effect = RuntimeError("boom")
        coordinator = InvalidationCoordinator(mock_aggregate)

        with pytest.raises(RuntimeError):
            await coordinator.invalidate_aggregate(InvalidationReason.EVICT)

    @pytest.mark.asyncio
    async def test_real_aggregate_slot_removed(
        self, all_movies: AllMoviesCache, invalidation: InvalidationCoordinator
    ) -> None:
        """With a real aggregate the slot is deleted from the store."""
        await all_movies.store.set("all_movies", b"[]")

        assert await invalidation.invalidate_aggregate(InvalidationReason.PUT) is True
        assert await all_movies.store.get("all_movies") is None
