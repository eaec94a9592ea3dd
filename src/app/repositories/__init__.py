from .exceptions import PersistenceError
from .transaction_repository import TransactionRepository
from .user_repository import UserRepository
from .promo_repository import PromoRepository
from .discount_repository import DiscountRepository

__all__ = [
    "PersistenceError",
    "TransactionRepository",
    "UserRepository",
    "PromoRepository",
    "DiscountRepository",
]
