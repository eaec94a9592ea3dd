"""Provisioning Service Interface

Defines the contract for creating hosting-panel accounts and servers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from pydantic import BaseModel


class ProvisioningError(Exception):
    """The control panel refused or failed an account/server creation"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ProvisioningResult(BaseModel):
    """Credentials and panel objects handed back to the buyer"""

    user: Dict[str, Any]
    server: Optional[Dict[str, Any]] = None
    password: str
    email: str


class ProvisioningService(ABC):
    """Control-panel client used once a payment is confirmed"""

    @abstractmethod
    async def create_admin_panel(self, username: str) -> ProvisioningResult:
        """
        Create a root-admin panel account

        Raises:
            ProvisioningError: Panel API returned errors
        """
        pass

    @abstractmethod
    async def create_server(self, username: str, product_type: str) -> ProvisioningResult:
        """
        Create a panel user and a server sized for the product tier

        Raises:
            ProvisioningError: Panel API returned errors
        """
        pass
