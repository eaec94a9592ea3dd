"""Data Transfer Objects for Account Use Cases"""

from typing import Optional
from pydantic import BaseModel, Field


class RegisterUserCommandDTO(BaseModel):
    name: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    password: str = Field(..., description="Plain password, at least 6 characters")
    email: Optional[str] = Field(default=None, description="Defaults to <username>@panel.com")


class LoginCommandDTO(BaseModel):
    identifier: str = Field(..., min_length=1, description="Username or email")
    password: str = Field(..., min_length=1)
