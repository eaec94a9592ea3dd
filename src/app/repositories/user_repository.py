"""User Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.user import User


class UserRepository(ABC):
    """
    Repository interface for User accounts

    Write methods raise PersistenceError when the backing store
    cannot be saved.
    """

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_login(self, identifier: str) -> Optional[User]:
        """
        Find a user by username or email

        Args:
            identifier: Username or email address

        Returns:
            Matching User or None
        """
        pass

    @abstractmethod
    async def exists(self, username: str, email: str) -> bool:
        """True if any user already has this username or email"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        pass
