"""RegisterUser Use Case"""

import logging

from libs.result import Result, Return, Error
from src.app.repositories.exceptions import PersistenceError
from src.app.repositories.user_repository import UserRepository
from src.app.services.password_hasher import PasswordHasher
from src.domain.base import utc_now
from src.domain.user import User
from .dtos import RegisterUserCommandDTO

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class RegisterUser:
    """
    Use Case: Register a storefront account

    Business Rules:
    1. Password is at least 6 characters and stored as a bcrypt hash
    2. Username and email are unique (email defaults to <username>@panel.com)
    """

    def __init__(self, user_repo: UserRepository, password_hasher: PasswordHasher):
        self.user_repo = user_repo
        self.password_hasher = password_hasher

    async def execute(self, command: RegisterUserCommandDTO) -> Result[User]:
        if len(command.password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    code="INVALID_INPUT",
                    message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                )
            )

        email = command.email or f"{command.username}@panel.com"
        if await self.user_repo.exists(command.username, email):
            return Return.err(
                Error(code="USER_EXISTS", message="Username is already registered")
            )

        now = utc_now()
        user = User(
            name=command.name,
            username=command.username,
            email=email,
            password_hash=self.password_hasher.hash(command.password),
            created_at=now,
            last_login=now,
        )

        try:
            await self.user_repo.create(user)
        except PersistenceError as e:
            return Return.err(
                Error(code="PERSISTENCE_FAILED", message="Failed to save user data", reason=e.message)
            )

        logger.info(f"User registered: {user.name} ({user.username}) - ID: {user.id}")
        return Return.ok(user)
