"""ListPromos Use Case"""

from typing import List

from libs.result import Result, Return
from src.app.repositories.promo_repository import PromoRepository
from src.domain.promo import Promo


class ListPromos:

    def __init__(self, promo_repo: PromoRepository):
        self.promo_repo = promo_repo

    async def execute(self) -> Result[List[Promo]]:
        return Return.ok(await self.promo_repo.list_all())
