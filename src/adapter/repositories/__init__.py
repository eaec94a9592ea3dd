from .in_memory_transaction_repository import InMemoryTransactionRepository
from .json_document_store import JsonDocumentStore
from .json_user_repository import JsonUserRepository
from .json_promo_repository import JsonPromoRepository
from .json_discount_repository import JsonDiscountRepository

__all__ = [
    "InMemoryTransactionRepository",
    "JsonDocumentStore",
    "JsonUserRepository",
    "JsonPromoRepository",
    "JsonDiscountRepository",
]
