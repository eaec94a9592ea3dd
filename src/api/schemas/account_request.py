"""Request schemas for Account API"""

from typing import Optional
from pydantic import Field, model_validator
from .base import CamelSchema


class RegisterRequestSchema(CamelSchema):
    name: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    email: Optional[str] = None


class LoginRequestSchema(CamelSchema):
    """Login with either username or email"""

    username: Optional[str] = None
    email: Optional[str] = None
    password: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def require_identifier(self):
        if not (self.username or self.email):
            raise ValueError("Username or email is required")
        return self

    @property
    def identifier(self) -> str:
        return self.username or self.email
