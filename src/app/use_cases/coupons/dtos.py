"""Data Transfer Objects for Coupon and Discount Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class CreatePromoCommandDTO(BaseModel):
    code: str = Field(..., min_length=1)
    discount: int = Field(..., gt=0, le=100, description="Discount percent")
    max_uses: int = Field(..., gt=0)
    expires_in_days: int = Field(default=30, gt=0)


class ClaimCouponCommandDTO(BaseModel):
    user_id: str = Field(..., min_length=1)
    coupon_code: str = Field(..., min_length=1)


class ClaimCouponResponseDTO(BaseModel):
    discount: int
    expires_at: datetime
    message: str


class DiscountResolutionDTO(BaseModel):
    """
    Discount consumed for an order

    discount_applied is 0 and discount_id None when nothing applied.
    """

    discount_applied: int = 0
    discount_id: Optional[str] = None
    discount_percent: int = 0


class DiscountCleanupResultDTO(BaseModel):
    removed: int
    cleaned_at: datetime
