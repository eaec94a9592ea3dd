"""CleanupExpiredDiscounts Use Case"""

import logging

from libs.result import Result, Return, Error
from src.app.repositories.discount_repository import DiscountRepository
from src.app.repositories.exceptions import PersistenceError
from src.domain.base import utc_now
from .dtos import DiscountCleanupResultDTO

logger = logging.getLogger(__name__)


class CleanupExpiredDiscounts:
    """Use Case: Drop claimed discounts past their expiry"""

    def __init__(self, discount_repo: DiscountRepository):
        self.discount_repo = discount_repo

    async def execute(self) -> Result[DiscountCleanupResultDTO]:
        now = utc_now()
        try:
            removed = await self.discount_repo.delete_expired(now)
        except PersistenceError as e:
            return Return.err(
                Error(code="PERSISTENCE_FAILED", message="Failed to clean up discounts", reason=e.message)
            )

        if removed:
            logger.info(f"Cleaned up {removed} expired discounts")
        return Return.ok(DiscountCleanupResultDTO(removed=removed, cleaned_at=now))
