"""Coupon and discount use cases"""
from .create_promo import CreatePromo, GeneratePromo
from .list_promos import ListPromos
from .claim_coupon import ClaimCoupon
from .discounts import GetActiveDiscount, UseDiscount
from .resolve_order_discount import ResolveOrderDiscount
from .cleanup_expired_discounts import CleanupExpiredDiscounts
from .dtos import (
    CreatePromoCommandDTO,
    ClaimCouponCommandDTO,
    ClaimCouponResponseDTO,
    DiscountResolutionDTO,
    DiscountCleanupResultDTO,
)

__all__ = [
    "CreatePromo",
    "GeneratePromo",
    "ListPromos",
    "ClaimCoupon",
    "GetActiveDiscount",
    "UseDiscount",
    "ResolveOrderDiscount",
    "CleanupExpiredDiscounts",
    "CreatePromoCommandDTO",
    "ClaimCouponCommandDTO",
    "ClaimCouponResponseDTO",
    "DiscountResolutionDTO",
    "DiscountCleanupResultDTO",
]
