"""JSON file implementation of PromoRepository"""

from typing import List, Optional
from src.app.repositories.promo_repository import PromoRepository
from src.domain.promo import Promo
from .json_document_store import JsonDocumentStore


class JsonPromoRepository(PromoRepository):
    """Promo codes stored in {"promos": [...]} (promoCodes.json)"""

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    def _all(self) -> List[Promo]:
        return [Promo.model_validate(doc) for doc in self.store.load()]

    async def get_by_code(self, code: str) -> Optional[Promo]:
        code = code.strip().upper()
        return next((p for p in self._all() if p.code == code), None)

    async def create(self, promo: Promo) -> Promo:
        async with self.store.lock:
            documents = self.store.load()
            documents.append(promo.to_document())
            self.store.save(documents)
        return promo

    async def update(self, promo: Promo) -> Promo:
        async with self.store.lock:
            documents = [
                promo.to_document() if str(doc.get("code", "")).upper() == promo.code else doc
                for doc in self.store.load()
            ]
            self.store.save(documents)
        return promo

    async def list_all(self) -> List[Promo]:
        return self._all()
