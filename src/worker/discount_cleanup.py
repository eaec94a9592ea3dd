"""Discount Cleanup Background Worker

Drops claimed discounts that have passed their expiry. Runs daily by
default, and once at startup.
"""

import asyncio
import logging
from typing import Optional

from src.app.use_cases.coupons import CleanupExpiredDiscounts

logger = logging.getLogger(__name__)


class DiscountCleanupWorker:

    def __init__(self, cleanup: CleanupExpiredDiscounts, interval_seconds: int = 86400):
        self.cleanup = cleanup
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    async def run_once(self) -> int:
        """
        Run cleanup once

        Returns:
            Number of discounts removed
        """
        result = await self.cleanup.execute()
        if result.is_err():
            logger.error(f"Discount cleanup failed: {result.error.message} ({result.error.reason})")
            return 0
        return result.value.removed

    async def run_forever(self, interval_seconds: Optional[int] = None):
        interval_seconds = interval_seconds or self.interval_seconds
        logger.info(f"Starting discount cleanup with {interval_seconds}s interval")

        while True:
            try:
                count = await self.run_once()
                logger.info(f"Discount cleanup cycle complete. Removed {count} discounts")
            except Exception as e:
                logger.error(f"Discount cleanup cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    def start(self) -> asyncio.Task:
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run_forever(), name="discount-cleanup")
        return self._task

    async def shutdown(self):
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
        logger.info("DiscountCleanupWorker shutdown complete")
