"""Background workers for the order service"""
from .transaction_sweeper import TransactionSweeperWorker
from .discount_cleanup import DiscountCleanupWorker

__all__ = ["TransactionSweeperWorker", "DiscountCleanupWorker"]
