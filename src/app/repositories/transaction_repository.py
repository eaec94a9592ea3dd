"""Transaction Repository Interface

Defines the contract for the registry of in-flight purchase transactions.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.transaction import Transaction


class TransactionRepository(ABC):
    """
    Repository interface for in-flight Transactions

    Holds at most one Transaction per id. Contents are not durable:
    implementations may lose every entry on restart.
    """

    @abstractmethod
    async def add(self, transaction: Transaction) -> Transaction:
        """
        Register a new transaction

        Args:
            transaction: Transaction with a fresh id

        Returns:
            The stored Transaction
        """
        pass

    @abstractmethod
    async def get(self, transaction_id: str) -> Optional[Transaction]:
        """
        Retrieve transaction by id

        Args:
            transaction_id: Transaction identifier

        Returns:
            Transaction if present, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, transaction: Transaction) -> Transaction:
        """Persist changes to an existing transaction (status, provisioned)"""
        pass

    @abstractmethod
    async def delete(self, transaction_id: str) -> bool:
        """
        Remove a transaction

        Returns:
            True if an entry was removed, False if it was already absent
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Transaction]:
        """Snapshot of every stored transaction"""
        pass
