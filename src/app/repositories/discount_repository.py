"""User Discount Repository Interface"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from src.domain.promo import UserDiscount


class DiscountRepository(ABC):
    """Repository interface for claimed UserDiscounts"""

    @abstractmethod
    async def get_by_id(self, discount_id: str) -> Optional[UserDiscount]:
        pass

    @abstractmethod
    async def find_active_for_user(self, user_id: str, now: datetime) -> Optional[UserDiscount]:
        """
        First unused, unexpired discount for a user

        Args:
            user_id: User identifier
            now: Reference time for expiry

        Returns:
            UserDiscount or None
        """
        pass

    @abstractmethod
    async def find_claim(self, user_id: str, coupon_code: str) -> Optional[UserDiscount]:
        """Existing claim of a coupon by a user, used or not"""
        pass

    @abstractmethod
    async def create(self, discount: UserDiscount) -> UserDiscount:
        pass

    @abstractmethod
    async def update(self, discount: UserDiscount) -> UserDiscount:
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """
        Drop discounts whose expires_at has passed

        Returns:
            Number of discounts removed
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[UserDiscount]:
        pass
