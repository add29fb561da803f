from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Comment


class ICommentRepository(ABC):
    """Comment repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, comment_id: UUID) -> Optional[Comment]:
        """Get comment by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Comment]:
        """List every comment"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List[Comment]:
        """List comments written by a user"""
        pass

    @abstractmethod
    async def list_by_post_id(self, post_id: UUID) -> List[Comment]:
        """List comments left on a post"""
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Create a new comment"""
        pass

    @abstractmethod
    async def update(self, comment: Comment) -> Comment:
        """Update existing comment"""
        pass

    @abstractmethod
    async def delete(self, comment: Comment) -> None:
        """Delete comment row"""
        pass
