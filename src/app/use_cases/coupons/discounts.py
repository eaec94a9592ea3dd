"""GetActiveDiscount and UseDiscount Use Cases"""

from typing import Optional

from libs.result import Result, Return, Error
from src.app.repositories.discount_repository import DiscountRepository
from src.app.repositories.exceptions import PersistenceError
from src.domain.base import utc_now
from src.domain.promo import UserDiscount


class GetActiveDiscount:
    """First unused, unexpired discount of a user (None when there is none)"""

    def __init__(self, discount_repo: DiscountRepository):
        self.discount_repo = discount_repo

    async def execute(self, user_id: str) -> Result[Optional[UserDiscount]]:
        return Return.ok(await self.discount_repo.find_active_for_user(user_id, utc_now()))


class UseDiscount:
    """Mark a discount as consumed"""

    def __init__(self, discount_repo: DiscountRepository):
        self.discount_repo = discount_repo

    async def execute(self, discount_id: str) -> Result[UserDiscount]:
        discount = await self.discount_repo.get_by_id(discount_id)
        if not discount:
            return Return.err(Error(code="DISCOUNT_NOT_FOUND", message=f"Discount {discount_id} not found"))

        discount.mark_used(utc_now())
        try:
            await self.discount_repo.update(discount)
        except PersistenceError as e:
            return Return.err(
                Error(code="PERSISTENCE_FAILED", message="Failed to save discount", reason=e.message)
            )
        return Return.ok(discount)
