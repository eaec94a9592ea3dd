"""ResolveOrderDiscount Use Case

Consumes a user's active discount for an order about to be charged.
"""

import logging

from libs.result import Result, Return
from src.app.repositories.discount_repository import DiscountRepository
from src.app.repositories.exceptions import PersistenceError
from src.domain.base import utc_now
from src.domain.promo import discount_amount
from .dtos import DiscountResolutionDTO

logger = logging.getLogger(__name__)


class ResolveOrderDiscount:
    """
    Use Case: Resolve and consume the discount for an order

    Business Rules:
    1. Uses the user's first unused, unexpired discount
    2. Amount = price * percent / 100, rounded half up
    3. The discount is marked used before the charge is created
    4. Any failure means "no discount"; it never blocks the order
    """

    def __init__(self, discount_repo: DiscountRepository):
        self.discount_repo = discount_repo

    async def execute(self, user_id: str, price: int) -> Result[DiscountResolutionDTO]:
        now = utc_now()
        discount = await self.discount_repo.find_active_for_user(user_id, now)
        if not discount:
            return Return.ok(DiscountResolutionDTO())

        discount.mark_used(now)
        try:
            await self.discount_repo.update(discount)
        except PersistenceError as e:
            logger.error(f"Could not consume discount {discount.id} for {user_id}, ordering without it: {e.message}")
            return Return.ok(DiscountResolutionDTO())

        amount = discount_amount(price, discount.discount_percent)
        logger.info(f"Discount applied: {discount.discount_percent}% - {amount} (user={user_id})")
        return Return.ok(
            DiscountResolutionDTO(
                discount_applied=amount,
                discount_id=discount.id,
                discount_percent=discount.discount_percent,
            )
        )
