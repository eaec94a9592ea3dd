"""In-memory implementation of TransactionRepository

In-flight transactions live only in process memory: a restart drops
every pending purchase.
"""

from typing import Dict, List, Optional
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.transaction import Transaction


class InMemoryTransactionRepository(TransactionRepository):
    """
    Dict-backed transaction registry keyed by transaction id

    Each instance owns its own dict; nothing is shared between instances.
    """

    def __init__(self):
        self._transactions: Dict[str, Transaction] = {}

    async def add(self, transaction: Transaction) -> Transaction:
        """
        Register a new transaction

        Raises:
            ValueError: If the id is already registered
        """
        if transaction.id in self._transactions:
            raise ValueError(f"Transaction {transaction.id} already exists")
        self._transactions[transaction.id] = transaction
        return transaction

    async def get(self, transaction_id: str) -> Optional[Transaction]:
        return self._transactions.get(transaction_id)

    async def save(self, transaction: Transaction) -> Transaction:
        """Update a registered transaction; a removed one is not re-added"""
        if transaction.id in self._transactions:
            self._transactions[transaction.id] = transaction
        return transaction

    async def delete(self, transaction_id: str) -> bool:
        return self._transactions.pop(transaction_id, None) is not None

    async def list_all(self) -> List[Transaction]:
        return list(self._transactions.values())

    def count(self) -> int:
        return len(self._transactions)
