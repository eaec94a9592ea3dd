"""Purchase Transaction Domain Entity

An in-flight purchase: a payment charge created with the gateway plus the
provisioning request that runs once the charge is paid.
"""

from datetime import datetime, timedelta
from typing import Optional
from pydantic import Field, model_validator
from src.domain.base import BaseModel, unique_millis

STATUS_PENDING = "pending"
STATUS_SUCCESS = "success"


def generate_reference() -> str:
    """Local reference embedded in gateway requests and admin messages"""
    return f"WEB-{unique_millis()}"


def generate_temporary_id() -> str:
    """Store key used when the gateway does not return a charge id"""
    return f"TEMP_{unique_millis()}"


class Transaction(BaseModel):
    """
    Transaction - a purchase awaiting payment and provisioning

    Domain Rules:
    - id is the store key and never changes
    - product, subject and pricing fields are fixed at creation
    - final_price = original_price - discount_applied, discount_applied >= 0
    - status is only written by payment status reconciliation
    - provisioned goes False -> True at most once
    - removed once now > expires_at or the record is older than the max age
    """

    id: str = Field(frozen=True, description="Gateway charge id, or TEMP_<ms> when absent")
    reff: str = Field(frozen=True, description="Local reference (WEB-<ms>)")
    atlantic_id: Optional[str] = Field(
        default=None,
        frozen=True,
        description="Gateway charge id used for status and cancel calls",
    )
    product_type: str = Field(frozen=True)
    username: str = Field(frozen=True, description="Panel account to provision")
    is_admin_panel: bool = Field(default=False, frozen=True)
    original_price: int = Field(frozen=True, gt=0)
    discount_applied: int = Field(default=0, frozen=True, ge=0)
    final_price: int = Field(frozen=True, ge=0)
    discount_id: Optional[str] = Field(default=None, frozen=True)
    user_id: Optional[str] = Field(default=None, frozen=True)
    status: str = Field(default=STATUS_PENDING)
    provisioned: bool = Field(default=False)
    created_at: datetime = Field(frozen=True)
    expires_at: datetime = Field(frozen=True)

    @model_validator(mode="after")
    def check_pricing(self):
        if self.final_price != self.original_price - self.discount_applied:
            raise ValueError("final_price must equal original_price - discount_applied")
        return self

    @property
    def charge_id(self) -> str:
        return self.atlantic_id or self.id

    @property
    def is_paid(self) -> bool:
        return self.status == STATUS_SUCCESS

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def is_stale(self, now: datetime, max_age: timedelta) -> bool:
        return now - self.created_at > max_age

    def mark_provisioned(self) -> None:
        if self.provisioned:
            raise ValueError(f"Transaction {self.id} is already provisioned")
        self.provisioned = True
