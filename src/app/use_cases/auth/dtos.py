"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for registration and login.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterUserCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Email is already normalized (trimmed, lower-cased).
    """

    email: str
    password: str


class LoginCommand(BaseModel):
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
