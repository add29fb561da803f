"""
Authentication Use Cases

Registration and login.
"""

from .register_user_use_case import RegisterUserUseCase
from .login_use_case import LoginUseCase
from .dtos import LoginCommand, LoginResponse, RegisterUserCommand

__all__ = [
    # Use Cases
    "RegisterUserUseCase",
    "LoginUseCase",
    # DTOs - Commands
    "RegisterUserCommand",
    "LoginCommand",
    # DTOs - Responses
    "LoginResponse",
]
