"""Transaction lifecycle use cases"""
from .create_transaction import CreateTransaction
from .check_payment_status import CheckPaymentStatus
from .cancel_transaction import CancelTransaction
from .sweep_transactions import SweepTransactions
from .lifecycle_manager import TransactionLifecycleManager
from .transaction_locks import TransactionLocks
from .dtos import (
    CreateTransactionCommandDTO,
    TransactionDescriptorDTO,
    StatusResultDTO,
    CancelResultDTO,
    SweepResultDTO,
)

__all__ = [
    "CreateTransaction",
    "CheckPaymentStatus",
    "CancelTransaction",
    "SweepTransactions",
    "TransactionLifecycleManager",
    "TransactionLocks",
    "CreateTransactionCommandDTO",
    "TransactionDescriptorDTO",
    "StatusResultDTO",
    "CancelResultDTO",
    "SweepResultDTO",
]
