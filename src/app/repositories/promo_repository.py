"""Promo Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.promo import Promo


class PromoRepository(ABC):
    """Repository interface for Promo codes (keyed by upper-case code)"""

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[Promo]:
        pass

    @abstractmethod
    async def create(self, promo: Promo) -> Promo:
        pass

    @abstractmethod
    async def update(self, promo: Promo) -> Promo:
        pass

    @abstractmethod
    async def list_all(self) -> List[Promo]:
        pass
