"""
User Management Use Cases

All user-related business logic.
"""

from .list_users_use_case import ListUsersUseCase
from .get_user_use_case import GetUserUseCase
from .change_password_use_case import ChangePasswordUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import ChangePasswordCommand, UserDetailResponse, UserResponse

__all__ = [
    # Use Cases
    "ListUsersUseCase",
    "GetUserUseCase",
    "ChangePasswordUseCase",
    "DeleteUserUseCase",
    # DTOs
    "ChangePasswordCommand",
    "UserResponse",
    "UserDetailResponse",
]
