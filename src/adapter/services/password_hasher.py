"""bcrypt password hashing"""

import bcrypt
from src.app.services.password_hasher import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """Hashes compatible with the $2b$10$ records already in dataLogin.json"""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
