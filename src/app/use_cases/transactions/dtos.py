"""Data Transfer Objects for Transaction Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from src.app.services.provisioning_service import ProvisioningResult
from src.domain.transaction import Transaction


class CreateTransactionCommandDTO(BaseModel):
    """
    Command DTO for creating a purchase transaction

    Discount fields carry an already-resolved and already-consumed
    discount; the lifecycle manager does not check eligibility.
    """

    product_type: str = Field(..., description="Product id from the catalog")
    username: str = Field(..., min_length=1, description="Panel account to provision")
    is_admin_panel: bool = Field(default=False, description="Provision a root-admin account instead of a server")
    discount_applied: int = Field(default=0, description="Rupiah taken off the price")
    discount_id: Optional[str] = Field(default=None, description="Consumed UserDiscount id")
    user_id: Optional[str] = Field(default=None, description="Storefront account placing the order")


class TransactionDescriptorDTO(BaseModel):
    """Everything the buyer needs to pay: QR payload plus pricing"""

    transaction_id: str
    reff: str
    product_type: str
    username: str
    original_price: int
    final_price: int
    discount_applied: int
    qr_image: str = Field(..., description="PNG data URL")
    qr_string: str
    expires_at: datetime
    atlantic_id: Optional[str] = None
    fee: int = 0
    get_balance: int


class StatusResultDTO(BaseModel):
    """
    Outcome of a payment status check

    provisioning is set only on the call that provisioned the order;
    provisioning_error is set when payment succeeded but provisioning did not.
    """

    status: str
    message: str
    transaction: Transaction
    provisioning: Optional[ProvisioningResult] = None
    provisioning_error: Optional[str] = None


class CancelResultDTO(BaseModel):
    transaction_id: str
    message: str


class SweepResultDTO(BaseModel):
    expired_ids: List[str] = Field(default_factory=list, description="Removed because expires_at passed")
    stale_ids: List[str] = Field(default_factory=list, description="Removed because older than the max age")
    remaining: int = 0
    swept_at: datetime

    @property
    def removed_count(self) -> int:
        return len(self.expired_ids) + len(self.stale_ids)
