"""Coupon and Discount API Routes"""

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError
from src.api.schemas.coupon_request import (
    ClaimCouponRequestSchema,
    UseDiscountRequestSchema,
    CreatePromoRequestSchema,
)
from src.app.use_cases.coupons import (
    ClaimCoupon,
    GetActiveDiscount,
    UseDiscount,
    CreatePromo,
    ListPromos,
    ClaimCouponCommandDTO,
    CreatePromoCommandDTO,
)
from src.depends import (
    get_claim_coupon,
    get_active_discount,
    get_use_discount,
    get_create_promo,
    get_list_promos,
)

router = APIRouter(tags=["Coupons"])


@router.post("/claim-coupon", status_code=status.HTTP_200_OK)
async def claim_coupon(
    request: ClaimCouponRequestSchema,
    use_case: ClaimCoupon = Depends(get_claim_coupon),
):
    """
    Claim a promo code as a personal discount.

    The discount is valid for 7 days and applies to one order.
    """
    result = await use_case.execute(
        ClaimCouponCommandDTO(user_id=request.user_id, coupon_code=request.coupon_code)
    )
    if result.is_err():
        raise ClientError(result.error)

    claim = result.value
    return {
        "success": True,
        "message": claim.message,
        "discount": claim.discount,
        "expiresAt": claim.expires_at.isoformat(),
    }


@router.get("/user-discount/{user_id}", status_code=status.HTTP_200_OK)
async def user_discount(user_id: str, use_case: GetActiveDiscount = Depends(get_active_discount)):
    discount = (await use_case.execute(user_id)).value
    if discount is None:
        return {"success": True, "hasDiscount": False}
    return {"success": True, "hasDiscount": True, "discount": discount.to_document()}


@router.post("/use-discount", status_code=status.HTTP_200_OK)
async def use_discount(
    request: UseDiscountRequestSchema,
    use_case: UseDiscount = Depends(get_use_discount),
):
    result = await use_case.execute(request.discount_id)
    if result.is_err():
        raise ClientError(result.error)

    return {"success": True, "message": "Discount used"}


@router.get("/promos", status_code=status.HTTP_200_OK)
async def list_promos(use_case: ListPromos = Depends(get_list_promos)):
    promos = (await use_case.execute()).value
    return {"success": True, "promos": [p.to_document() for p in promos]}


@router.post("/create-promo", status_code=status.HTTP_200_OK)
async def create_promo(
    request: CreatePromoRequestSchema,
    use_case: CreatePromo = Depends(get_create_promo),
):
    result = await use_case.execute(
        CreatePromoCommandDTO(
            code=request.code,
            discount=request.discount,
            max_uses=request.max_uses,
            expires_in_days=request.expires_in_days,
        )
    )
    if result.is_err():
        raise ClientError(result.error)

    return {"success": True, "message": "Promo code created", "promo": result.value.to_document()}
