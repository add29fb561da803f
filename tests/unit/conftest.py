import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()

    uow.posts = MagicMock()
    uow.posts.get_by_id = AsyncMock(return_value=None)
    uow.posts.list_all = AsyncMock(return_value=[])
    uow.posts.list_by_user_id = AsyncMock(return_value=[])
    uow.posts.create = AsyncMock(side_effect=lambda post: post)
    uow.posts.update = AsyncMock(side_effect=lambda post: post)
    uow.posts.delete = AsyncMock()

    uow.comments = MagicMock()
    uow.comments.get_by_id = AsyncMock(return_value=None)
    uow.comments.list_all = AsyncMock(return_value=[])
    uow.comments.list_by_user_id = AsyncMock(return_value=[])
    uow.comments.list_by_post_id = AsyncMock(return_value=[])
    uow.comments.create = AsyncMock(side_effect=lambda comment: comment)
    uow.comments.update = AsyncMock(side_effect=lambda comment: comment)
    uow.comments.delete = AsyncMock()

    return uow


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return TokenService(secret="unit-test-secret", ttl=3600)
