"""Account use cases"""
from .register_user import RegisterUser
from .login_user import LoginUser
from .get_user import GetUser, ListUsers
from .dtos import RegisterUserCommandDTO, LoginCommandDTO

__all__ = [
    "RegisterUser",
    "LoginUser",
    "GetUser",
    "ListUsers",
    "RegisterUserCommandDTO",
    "LoginCommandDTO",
]
