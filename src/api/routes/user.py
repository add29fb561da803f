from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from src.api.error import COMMON_STATUS_BY_CODE, raise_for_error
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    RegisterUserCommand,
    RegisterUserUseCase,
)
from src.app.use_cases.users import (
    ChangePasswordCommand,
    ChangePasswordUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UserDetailResponse,
    UserResponse,
)
from src.depends import (
    get_current_user,
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/user", tags=["User"])

_STATUS_BY_CODE = {
    **COMMON_STATUS_BY_CODE,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
}


def _clean_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _require_password(value: str) -> str:
    """Blank and short checks ignore surrounding whitespace; the value is kept as sent"""
    trimmed = value.strip()
    if not trimmed:
        raise ValueError("Password is required")
    if len(trimmed) < 8:
        raise ValueError("Password must be at least 8 characters long")
    return value


class CreateUserRequest(BaseModel):
    """
    Registration HTTP request payload

    Email is trimmed and lower-cased before validation.
    """

    email: EmailStr = Field(..., max_length=255, description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _clean_email(value)

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, value: str) -> str:
        return _require_password(value)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, description="User email address")
    password: str = Field(..., min_length=1, description="User password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _clean_email(value)


class UpdateUserRequest(BaseModel):
    """Password change payload"""

    password: str = Field(..., min_length=8, description="New password (min 8 chars)")

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, value: str) -> str:
        return _require_password(value)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[UserDetailResponse])
async def get_users(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all users with their posts and comments. Public."""
    result = await ListUsersUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error, _STATUS_BY_CODE)
    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserDetailResponse)
async def get_user(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get user by ID. Public.

    Raises:
        - 404 Not Found: USER_NOT_FOUND
    """
    result = await GetUserUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error, _STATUS_BY_CODE)
    return result.value


@router.post("", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def create_user(
    request: CreateUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Register a new account. Public.

    Raises:
        - 400 Bad Request: invalid email or password shorter than 8 chars
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    command = RegisterUserCommand(email=request.email, password=request.password)

    result = await RegisterUserUseCase(uow, hasher).execute(command)
    if result.is_err():
        raise_for_error(result.error, _STATUS_BY_CODE)
    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Exchange email and password for a bearer token.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS (same for unknown email and wrong password)
    """
    command = LoginCommand(email=request.email, password=request.password)

    result = await LoginUseCase(uow, hasher, tokens).execute(command)
    if result.is_err():
        raise_for_error(result.error, _STATUS_BY_CODE)
    return result.value


@router.put("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Change the password of the caller's own account.

    Raises:
        - 401 Unauthorized: missing, invalid or expired token
        - 403 Forbidden: OWNERSHIP_MISMATCH
        - 404 Not Found: USER_NOT_FOUND
    """
    command = ChangePasswordCommand(password=request.password)

    result = await ChangePasswordUseCase(uow, hasher).execute(current_user, user_id, command)
    if result.is_err():
        raise_for_error(result.error, _STATUS_BY_CODE)
    return result.value


@router.delete("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def delete_user(
    user_id: UUID,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete the caller's own account, with its posts and comments.

    Raises:
        - 401 Unauthorized: missing, invalid or expired token
        - 403 Forbidden: OWNERSHIP_MISMATCH
        - 404 Not Found: USER_NOT_FOUND
    """
    result = await DeleteUserUseCase(uow).execute(current_user, user_id)
    if result.is_err():
        raise_for_error(result.error, _STATUS_BY_CODE)
    return result.value
