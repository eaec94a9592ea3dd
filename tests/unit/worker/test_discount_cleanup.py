"""Unit tests for DiscountCleanupWorker"""

import asyncio
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from libs.result import Return, Error
from src.app.use_cases.coupons import DiscountCleanupResultDTO
from src.worker.discount_cleanup import DiscountCleanupWorker


def cleanup_returning(removed: int):
    cleanup = MagicMock()
    cleanup.execute = AsyncMock(
        return_value=Return.ok(
            DiscountCleanupResultDTO(removed=removed, cleaned_at=datetime(2024, 5, 1, tzinfo=timezone.utc))
        )
    )
    return cleanup


@pytest.mark.asyncio
class TestDiscountCleanupWorker:

    async def test_run_once_returns_removed_count(self):
        assert await DiscountCleanupWorker(cleanup_returning(3)).run_once() == 3

    async def test_run_once_error_counts_as_zero(self):
        cleanup = MagicMock()
        cleanup.execute = AsyncMock(
            return_value=Return.err(Error(code="PERSISTENCE_FAILED", message="disk full"))
        )

        assert await DiscountCleanupWorker(cleanup).run_once() == 0

    async def test_start_runs_immediately_then_shuts_down(self):
        """
        Given a worker with a daily interval
        When it is started
        Then the first cleanup runs right away and shutdown cancels the sleep
        """
        # Arrange
        cleanup = cleanup_returning(0)
        worker = DiscountCleanupWorker(cleanup, interval_seconds=3600)

        # Act
        task = worker.start()
        for _ in range(10):
            if cleanup.execute.await_count:
                break
            await asyncio.sleep(0)
        await worker.shutdown()

        # Assert
        cleanup.execute.assert_awaited_once()
        assert task.done()
