"""Per-transaction locks

Status checks and cancellation for the same transaction id run one at a
time; different ids never wait on each other.
"""

import asyncio
from typing import Dict


class TransactionLocks:

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}

    def get(self, transaction_id: str) -> asyncio.Lock:
        lock = self._locks.get(transaction_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[transaction_id] = lock
        return lock

    def discard(self, transaction_id: str) -> None:
        self._locks.pop(transaction_id, None)

    def __contains__(self, transaction_id: str) -> bool:
        return transaction_id in self._locks

    def __len__(self) -> int:
        return len(self._locks)
