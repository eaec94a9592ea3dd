"""ClaimCoupon Use Case

Turns a published promo code into a personal discount for one user.
"""

import logging

from libs.result import Result, Return, Error
from src.app.repositories.discount_repository import DiscountRepository
from src.app.repositories.exceptions import PersistenceError
from src.app.repositories.promo_repository import PromoRepository
from src.app.repositories.user_repository import UserRepository
from src.app.services.notification_service import NotificationService
from src.app.use_cases.messages import coupon_claimed_message
from src.domain.base import utc_now
from src.domain.promo import UserDiscount, CLAIMED_DISCOUNT_VALIDITY
from .dtos import ClaimCouponCommandDTO, ClaimCouponResponseDTO

logger = logging.getLogger(__name__)


class ClaimCoupon:
    """
    Use Case: Claim a coupon

    Business Rules:
    1. User must exist
    2. Promo must be active, unexpired and below max_uses
    3. A user claims a given code once
    4. The claimed discount is valid for 7 days
    5. Admin is notified of every claim

    Flow:
    1. Validate user and promo
    2. Create UserDiscount, bump promo usage and the user's claim count
    3. Persist discount, promo, user
    4. Notify admin
    """

    def __init__(
        self,
        user_repo: UserRepository,
        promo_repo: PromoRepository,
        discount_repo: DiscountRepository,
        notifications: NotificationService,
    ):
        self.user_repo = user_repo
        self.promo_repo = promo_repo
        self.discount_repo = discount_repo
        self.notifications = notifications

    async def execute(self, command: ClaimCouponCommandDTO) -> Result[ClaimCouponResponseDTO]:
        code = command.coupon_code.strip().upper()
        now = utc_now()

        user = await self.user_repo.get_by_id(command.user_id)
        if not user:
            return Return.err(Error(code="USER_NOT_FOUND", message=f"User {command.user_id} not found"))

        promo = await self.promo_repo.get_by_code(code)
        if not promo or not promo.is_active:
            return Return.err(Error(code="INVALID_COUPON", message="Coupon is invalid or inactive"))
        if promo.is_expired(now):
            return Return.err(Error(code="COUPON_EXPIRED", message="Coupon has expired"))
        if promo.is_exhausted():
            return Return.err(Error(code="COUPON_EXHAUSTED", message="Coupon has reached its usage limit"))
        if await self.discount_repo.find_claim(user.id, code):
            return Return.err(Error(code="COUPON_ALREADY_CLAIMED", message="You have already claimed this coupon"))

        discount = UserDiscount(
            user_id=user.id,
            coupon_code=code,
            discount_percent=promo.discount,
            claimed_at=now,
            expires_at=now + CLAIMED_DISCOUNT_VALIDITY,
        )
        promo.used_count += 1
        user.coupons_claimed += 1

        try:
            await self.discount_repo.create(discount)
            await self.promo_repo.update(promo)
            await self.user_repo.update(user)
        except PersistenceError as e:
            return Return.err(
                Error(code="PERSISTENCE_FAILED", message="Failed to save coupon claim", reason=e.message)
            )

        logger.info(f"Coupon claimed: {user.name} ({user.email}) - {code}")
        try:
            await self.notifications.send_message(coupon_claimed_message(user, promo))
        except Exception as e:
            logger.error(f"Coupon claim notification failed: {e}")

        return Return.ok(
            ClaimCouponResponseDTO(
                discount=promo.discount,
                expires_at=discount.expires_at,
                message=f"Coupon claimed! You get a {promo.discount}% discount",
            )
        )
