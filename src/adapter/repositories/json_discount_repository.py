"""JSON file implementation of DiscountRepository"""

from datetime import datetime
from typing import List, Optional
from src.app.repositories.discount_repository import DiscountRepository
from src.domain.promo import UserDiscount
from .json_document_store import JsonDocumentStore


class JsonDiscountRepository(DiscountRepository):
    """Claimed discounts stored in {"discounts": [...]} (userDiscounts.json)"""

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    def _all(self) -> List[UserDiscount]:
        return [UserDiscount.model_validate(doc) for doc in self.store.load()]

    async def get_by_id(self, discount_id: str) -> Optional[UserDiscount]:
        return next((d for d in self._all() if d.id == discount_id), None)

    async def find_active_for_user(self, user_id: str, now: datetime) -> Optional[UserDiscount]:
        return next(
            (d for d in self._all() if d.user_id == user_id and d.is_active(now)),
            None,
        )

    async def find_claim(self, user_id: str, coupon_code: str) -> Optional[UserDiscount]:
        coupon_code = coupon_code.strip().upper()
        return next(
            (d for d in self._all() if d.user_id == user_id and d.coupon_code == coupon_code),
            None,
        )

    async def create(self, discount: UserDiscount) -> UserDiscount:
        async with self.store.lock:
            documents = self.store.load()
            documents.append(discount.to_document())
            self.store.save(documents)
        return discount

    async def update(self, discount: UserDiscount) -> UserDiscount:
        async with self.store.lock:
            documents = [
                discount.to_document() if doc.get("id") == discount.id else doc
                for doc in self.store.load()
            ]
            self.store.save(documents)
        return discount

    async def delete_expired(self, now: datetime) -> int:
        async with self.store.lock:
            discounts = self._all()
            active = [d for d in discounts if d.expires_at > now]
            removed = len(discounts) - len(active)
            if removed:
                self.store.save([d.to_document() for d in active])
        return removed

    async def list_all(self) -> List[UserDiscount]:
        return self._all()
