"""Product Catalog

Panel products sold by the service. User panels are servers sized by
package tier; admin panels are control-panel accounts of a given grade.
"""

from enum import Enum
from typing import Dict, List, Optional
from src.domain.base import BaseModel


class PanelKind(str, Enum):
    """Which provisioning branch a product goes through"""
    USER = "user"    # Panel user plus a server
    ADMIN = "admin"  # Root-admin panel account


class Product(BaseModel):
    id: str
    name: str
    price: int
    type: PanelKind


class PackageResources(BaseModel):
    """Server limits for a user panel tier (MB, 0 = unlimited)"""
    ram: int
    disk: int


USER_PANELS: Dict[str, str] = {
    "1gb": "1GB Panel",
    "2gb": "2GB Panel",
    "3gb": "3GB Panel",
    "4gb": "4GB Panel",
    "5gb": "5GB Panel",
    "unli": "Unlimited Panel",
}

ADMIN_PANELS: Dict[str, str] = {
    "reseller": "Reseller",
    "admin": "Admin Panel",
    "pt": "PT Panel",
    "owner": "Owner Panel",
    "tk": "TK Panel",
    "ceo": "CEO Panel",
}

PACKAGE_RESOURCES: Dict[str, PackageResources] = {
    "1gb": PackageResources(ram=1024, disk=2048),
    "2gb": PackageResources(ram=2048, disk=4096),
    "3gb": PackageResources(ram=3072, disk=6144),
    "4gb": PackageResources(ram=4096, disk=8192),
    "5gb": PackageResources(ram=5120, disk=10240),
    "unli": PackageResources(ram=0, disk=0),
}

DEFAULT_PACKAGE = PackageResources(ram=1024, disk=2048)


def resources_for(product_type: str) -> PackageResources:
    """Server limits for a tier; unknown tiers get the 1GB package"""
    return PACKAGE_RESOURCES.get(product_type, DEFAULT_PACKAGE)


class ProductCatalog:
    """
    Product lookup backed by the configured price table

    A product is sellable only when it has a known name and a price > 0.
    """

    def __init__(self, prices: Dict[str, int]):
        self.prices = {key: int(value) for key, value in prices.items()}

    def get(self, product_type: str) -> Optional[Product]:
        price = self.prices.get(product_type, 0)
        if price <= 0:
            return None
        if product_type in USER_PANELS:
            return Product(id=product_type, name=USER_PANELS[product_type], price=price, type=PanelKind.USER)
        if product_type in ADMIN_PANELS:
            return Product(id=product_type, name=ADMIN_PANELS[product_type], price=price, type=PanelKind.ADMIN)
        return None

    def user_panels(self) -> List[Product]:
        return [p for p in (self.get(key) for key in USER_PANELS) if p]

    def admin_panels(self) -> List[Product]:
        return [p for p in (self.get(key) for key in ADMIN_PANELS) if p]
