"""Transaction Sweeper Background Worker

Periodically evicts expired and stale purchase transactions from the
lifecycle manager's store.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional

from src.app.use_cases.transactions.lifecycle_manager import TransactionLifecycleManager

logger = logging.getLogger(__name__)


class TransactionSweeperWorker:
    """
    Background worker for the transaction sweep

    Usage:
        # Run once
        worker = TransactionSweeperWorker(manager)
        await worker.run_once()

        # Run as an owned task
        worker.start()
        ...
        await worker.shutdown()
    """

    def __init__(self, manager: TransactionLifecycleManager, interval_seconds: int = 60):
        """
        Args:
            manager: Lifecycle manager owning the store to sweep
            interval_seconds: Seconds between sweep passes
        """
        self.manager = manager
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    async def run_once(self, now: Optional[datetime] = None) -> int:
        """
        Run one sweep pass

        Returns:
            Number of transactions removed
        """
        result = await self.manager.sweep(now)
        if result.is_err():
            logger.error(f"Sweep failed: {result.error.message}")
            return 0

        sweep = result.value
        if sweep.removed_count:
            logger.info(
                f"Sweep removed {len(sweep.expired_ids)} expired and {len(sweep.stale_ids)} stale "
                f"transactions, {sweep.remaining} remaining"
            )
        return sweep.removed_count

    async def run_forever(self, interval_seconds: Optional[int] = None):
        interval_seconds = interval_seconds or self.interval_seconds
        logger.info(f"Starting transaction sweeper with {interval_seconds}s interval")

        while True:
            await asyncio.sleep(interval_seconds)
            try:
                await self.run_once()
            except Exception as e:
                logger.error(f"Sweep cycle failed: {e}")

    def start(self) -> asyncio.Task:
        """Start run_forever as a task owned by this worker"""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run_forever(), name="transaction-sweeper")
        return self._task

    async def shutdown(self):
        """Cancel the running task, if any"""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
        logger.info("TransactionSweeperWorker shutdown complete")
