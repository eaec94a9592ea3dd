"""CreatePromo and GeneratePromo Use Cases"""

import logging
from datetime import timedelta

from libs.result import Result, Return, Error
from src.app.repositories.exceptions import PersistenceError
from src.app.repositories.promo_repository import PromoRepository
from src.domain.base import utc_now
from src.domain.promo import Promo, generate_coupon_code
from .dtos import CreatePromoCommandDTO

logger = logging.getLogger(__name__)

GENERATED_PROMO_DISCOUNT = 10
GENERATED_PROMO_MAX_USES = 50
GENERATED_PROMO_VALIDITY_DAYS = 30


class CreatePromo:
    """
    Use Case: Publish a promo code

    Business Rules:
    1. Codes are upper-cased and must be unique
    2. Expiry defaults to 30 days from creation
    """

    def __init__(self, promo_repo: PromoRepository):
        self.promo_repo = promo_repo

    async def execute(self, command: CreatePromoCommandDTO) -> Result[Promo]:
        code = command.code.strip().upper()
        if await self.promo_repo.get_by_code(code):
            return Return.err(Error(code="PROMO_EXISTS", message=f"Promo code {code} already exists"))

        now = utc_now()
        promo = Promo(
            code=code,
            discount=command.discount,
            max_uses=command.max_uses,
            created_at=now,
            expires_at=now + timedelta(days=command.expires_in_days),
        )
        try:
            await self.promo_repo.create(promo)
        except PersistenceError as e:
            return Return.err(
                Error(code="PERSISTENCE_FAILED", message="Failed to save promo code", reason=e.message)
            )

        logger.info(f"Promo created: {promo.code} - {promo.discount}%")
        return Return.ok(promo)


class GeneratePromo:
    """Use Case: Publish a random 8-character promo with the standard terms"""

    def __init__(self, promo_repo: PromoRepository):
        self.create_promo = CreatePromo(promo_repo)

    async def execute(self) -> Result[Promo]:
        return await self.create_promo.execute(
            CreatePromoCommandDTO(
                code=generate_coupon_code(),
                discount=GENERATED_PROMO_DISCOUNT,
                max_uses=GENERATED_PROMO_MAX_USES,
                expires_in_days=GENERATED_PROMO_VALIDITY_DAYS,
            )
        )
