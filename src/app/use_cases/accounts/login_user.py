"""LoginUser Use Case"""

import logging

from libs.result import Result, Return, Error
from src.app.repositories.exceptions import PersistenceError
from src.app.repositories.user_repository import UserRepository
from src.app.services.password_hasher import PasswordHasher
from src.domain.base import utc_now
from src.domain.user import User
from .dtos import LoginCommandDTO

logger = logging.getLogger(__name__)


class LoginUser:
    """
    Use Case: Authenticate by username or email

    Unknown identifier and wrong password produce the same error.
    """

    def __init__(self, user_repo: UserRepository, password_hasher: PasswordHasher):
        self.user_repo = user_repo
        self.password_hasher = password_hasher

    async def execute(self, command: LoginCommandDTO) -> Result[User]:
        invalid = Error(code="INVALID_CREDENTIALS", message="Invalid username/email or password")

        user = await self.user_repo.find_by_login(command.identifier)
        if not user:
            return Return.err(invalid)

        if not self.password_hasher.verify(command.password, user.password_hash):
            return Return.err(invalid)

        user.last_login = utc_now()
        try:
            await self.user_repo.update(user)
        except PersistenceError as e:
            # Login still succeeds; only the last_login stamp is lost
            logger.error(f"Failed to record login for {user.id}: {e.message}")

        logger.info(f"User login: {user.name} ({user.username or user.email}) - ID: {user.id}")
        return Return.ok(user)
