"""JSON file implementation of UserRepository"""

from typing import List, Optional
from src.app.repositories.user_repository import UserRepository
from src.domain.user import User
from .json_document_store import JsonDocumentStore


class JsonUserRepository(UserRepository):
    """Users stored in {"users": [...]} (dataLogin.json)"""

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    def _all(self) -> List[User]:
        return [User.model_validate(doc) for doc in self.store.load()]

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._all() if u.id == user_id), None)

    async def find_by_login(self, identifier: str) -> Optional[User]:
        return next(
            (u for u in self._all() if u.username == identifier or u.email == identifier),
            None,
        )

    async def exists(self, username: str, email: str) -> bool:
        return any(u.username == username or u.email == email for u in self._all())

    async def create(self, user: User) -> User:
        async with self.store.lock:
            documents = self.store.load()
            documents.append(user.to_document())
            self.store.save(documents)
        return user

    async def update(self, user: User) -> User:
        async with self.store.lock:
            documents = [
                user.to_document() if doc.get("id") == user.id else doc
                for doc in self.store.load()
            ]
            self.store.save(documents)
        return user

    async def list_all(self) -> List[User]:
        return self._all()
