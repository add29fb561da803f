import logging

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService

logger = logging.getLogger(__name__)

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher(request: Request) -> PasswordHasher:
    """Hasher built once by create_app"""
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    """Token service built once by create_app with the configured secret"""
    return request.app.state.token_service


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header (None if absent)
        tokens: Token service

    Returns:
        Authenticated user ID

    Raises:
        ClientError: 401 if token is missing, malformed, badly signed or expired.
            The response does not say which.
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("UNAUTHORIZED", "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers=_BEARER_CHALLENGE,
        )

    result = tokens.verify(credentials.credentials)

    if result.is_err():
        logger.warning("Bearer token rejected: %s", result.error.code)
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers=_BEARER_CHALLENGE,
        )

    return result.value
