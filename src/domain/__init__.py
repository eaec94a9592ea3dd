from .base import BaseModel, utc_now
from .transaction import Transaction, STATUS_PENDING, STATUS_SUCCESS
from .product import Product, ProductCatalog, PanelKind, PackageResources, resources_for
from .user import User
from .promo import Promo, UserDiscount

__all__ = [
    "BaseModel",
    "utc_now",
    "Transaction",
    "STATUS_PENDING",
    "STATUS_SUCCESS",
    "Product",
    "ProductCatalog",
    "PanelKind",
    "PackageResources",
    "resources_for",
    "User",
    "Promo",
    "UserDiscount",
]
