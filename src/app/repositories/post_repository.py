from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Post


class IPostRepository(ABC):
    """Post repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, post_id: UUID) -> Optional[Post]:
        """Get post by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Post]:
        """List every post"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List[Post]:
        """List posts written by a user"""
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Create a new post"""
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Update existing post"""
        pass

    @abstractmethod
    async def delete(self, post: Post) -> None:
        """Delete post row"""
        pass
