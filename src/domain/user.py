"""User Account Domain Entity"""

from datetime import datetime
from typing import Optional
from pydantic import Field
from src.domain.base import BaseModel, random_token, unique_millis, utc_now


def generate_user_id() -> str:
    return f"USER_{unique_millis()}_{random_token(9)}"


class User(BaseModel):
    """
    User - storefront account

    Domain Rules:
    - username and email are unique across users
    - password holds a bcrypt hash and is never exposed by the API
    - order_count / total_spent grow with every created order
    """

    id: str = Field(default_factory=generate_user_id)
    name: str
    username: Optional[str] = None
    email: str
    password_hash: str = Field(alias="password")
    role: str = "member"
    created_at: datetime = Field(default_factory=utc_now)
    last_login: Optional[datetime] = None
    order_count: int = 0
    total_spent: int = 0
    coupons_claimed: int = 0

    def public_view(self) -> dict:
        """Document without the password hash"""
        document = self.to_document()
        document.pop("password", None)
        return document

    def record_order(self, amount: int) -> None:
        self.order_count += 1
        self.total_spent += amount
