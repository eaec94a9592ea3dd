"""Account API Routes"""

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError
from src.api.schemas.account_request import RegisterRequestSchema, LoginRequestSchema
from src.app.use_cases.accounts import (
    RegisterUser,
    LoginUser,
    GetUser,
    ListUsers,
    RegisterUserCommandDTO,
    LoginCommandDTO,
)
from src.depends import get_register_user, get_login_user, get_get_user, get_list_users

router = APIRouter(tags=["Accounts"])


@router.post("/register", status_code=status.HTTP_200_OK)
async def register(
    request: RegisterRequestSchema,
    use_case: RegisterUser = Depends(get_register_user),
):
    """
    Register a storefront account.

    Passwords must be at least 6 characters; username and email must be unused.
    """
    result = await use_case.execute(
        RegisterUserCommandDTO(
            name=request.name,
            username=request.username,
            password=request.password,
            email=request.email,
        )
    )
    if result.is_err():
        raise ClientError(result.error)

    return {"success": True, "message": "Registration successful!", "user": result.value.public_view()}


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(
    request: LoginRequestSchema,
    use_case: LoginUser = Depends(get_login_user),
):
    result = await use_case.execute(LoginCommandDTO(identifier=request.identifier, password=request.password))
    if result.is_err():
        raise ClientError(result.error)

    return {"success": True, "message": "Login successful!", "user": result.value.public_view()}


@router.get("/user/{user_id}", status_code=status.HTTP_200_OK)
async def get_user(user_id: str, use_case: GetUser = Depends(get_get_user)):
    result = await use_case.execute(user_id)
    if result.is_err():
        raise ClientError(result.error)

    return {"success": True, "user": result.value.public_view()}


@router.get("/users", status_code=status.HTTP_200_OK)
async def list_users(use_case: ListUsers = Depends(get_list_users)):
    users = (await use_case.execute()).value
    return {"success": True, "users": [u.public_view() for u in users]}
