"""SweepTransactions Use Case

Evicts transactions that have expired or outlived the maximum age.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from libs.result import Result, Return
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.base import utc_now
from .dtos import SweepResultDTO
from .transaction_locks import TransactionLocks

logger = logging.getLogger(__name__)


class SweepTransactions:
    """
    Use Case: Remove expired and stale transactions

    Business Rules:
    1. Expired: now > expires_at
    2. Stale: now - created_at > max_age (24h), whatever expires_at says
    3. Purely local, no gateway calls
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        locks: TransactionLocks,
        max_age: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utc_now,
    ):
        self.transaction_repo = transaction_repo
        self.locks = locks
        self.max_age = max_age
        self.clock = clock

    async def execute(self, now: Optional[datetime] = None) -> Result[SweepResultDTO]:
        """
        Execute a sweep pass

        Args:
            now: Reference time (defaults to the clock)

        Returns:
            Result[SweepResultDTO]: Ids removed, by cause
        """
        now = now or self.clock()
        result = SweepResultDTO(swept_at=now)

        for transaction in await self.transaction_repo.list_all():
            if transaction.is_expired(now):
                result.expired_ids.append(transaction.id)
                logger.info(f"Removing expired transaction {transaction.id} (expired {transaction.expires_at.isoformat()})")
            elif transaction.is_stale(now, self.max_age):
                result.stale_ids.append(transaction.id)
                logger.info(f"Removing stale transaction {transaction.id} (created {transaction.created_at.isoformat()})")
            else:
                continue
            await self.transaction_repo.delete(transaction.id)
            self.locks.discard(transaction.id)

        result.remaining = len(await self.transaction_repo.list_all())
        return Return.ok(result)
