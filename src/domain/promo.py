"""Promo Code and User Discount Domain Entities

A Promo is a coupon an administrator publishes. Claiming it gives the user
a UserDiscount that is consumed by their next discounted order.
"""

import string
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from pydantic import Field, field_validator
from src.domain.base import BaseModel, random_token, unique_millis, utc_now

CLAIMED_DISCOUNT_VALIDITY = timedelta(days=7)


def generate_coupon_code() -> str:
    return random_token(8, string.ascii_uppercase + string.digits)


def generate_discount_id() -> str:
    return f"DISC_{unique_millis()}"


def discount_amount(price: int, percent: int) -> int:
    """Rupiah discount for a percentage, rounded half up"""
    amount = Decimal(price) * Decimal(percent) / Decimal(100)
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class Promo(BaseModel):
    """
    Promo - coupon code published by an administrator

    Domain Rules:
    - code is stored upper-case and is unique
    - claimable while active, unexpired and used_count < max_uses
    """

    code: str
    discount: int = Field(gt=0, le=100, description="Discount percent")
    max_uses: int = Field(gt=0)
    used_count: int = 0
    created_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime
    is_active: bool = True

    @field_validator("code")
    @classmethod
    def upper_case_code(cls, v: str) -> str:
        return v.strip().upper()

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now

    def is_exhausted(self) -> bool:
        return self.used_count >= self.max_uses


class UserDiscount(BaseModel):
    """
    UserDiscount - a claimed coupon waiting to be applied to an order

    Domain Rules:
    - one claim per (user_id, coupon_code)
    - usable once, until expires_at
    """

    id: str = Field(default_factory=generate_discount_id)
    user_id: str
    coupon_code: str
    discount_percent: int
    claimed_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime
    is_used: bool = False
    used_at: Optional[datetime] = None

    def is_active(self, now: datetime) -> bool:
        return not self.is_used and self.expires_at > now

    def mark_used(self, now: datetime) -> None:
        self.is_used = True
        self.used_at = now
