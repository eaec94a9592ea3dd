"""Request schemas for Order API

Pydantic models for validating incoming HTTP requests.
"""

from typing import Optional
from pydantic import Field, field_validator
from .base import CamelSchema


class CreateOrderRequestSchema(CamelSchema):
    """
    Request schema for creating an order

    Used for POST /api/create-order endpoint.
    """

    product_type: str = Field(..., min_length=1, description="Product id, e.g. '1gb' or 'reseller'")
    username: str = Field(..., min_length=1, description="Panel username to provision")
    is_admin_panel: bool = Field(default=False, description="Provision a root-admin account")
    user_id: Optional[str] = Field(default=None, description="Storefront account placing the order")
    apply_discount: bool = Field(default=False, description="Consume the user's active discount")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Username must not be blank")
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "productType": "1gb",
                "username": "budi",
                "isAdminPanel": False,
                "userId": "USER_1712345678901_k3j9x0a1b",
                "applyDiscount": True,
            }
        }
    }


class TransactionRequestSchema(CamelSchema):
    """Request schema for status checks and cancellations"""

    transaction_id: str = Field(..., min_length=1, description="Transaction id from create-order")
