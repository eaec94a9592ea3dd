"""Request schemas for Coupon and Discount API"""

from pydantic import Field
from .base import CamelSchema


class ClaimCouponRequestSchema(CamelSchema):
    user_id: str = Field(..., min_length=1)
    coupon_code: str = Field(..., min_length=1)


class UseDiscountRequestSchema(CamelSchema):
    discount_id: str = Field(..., min_length=1)


class CreatePromoRequestSchema(CamelSchema):
    code: str = Field(..., min_length=1)
    discount: int = Field(..., gt=0, le=100, description="Discount percent")
    max_uses: int = Field(..., gt=0)
    expires_in_days: int = Field(default=30, gt=0)
