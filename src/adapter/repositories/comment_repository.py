from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.comment_repository import ICommentRepository
from src.domain.entities import Comment


class CommentRepository(ICommentRepository):
    """Comment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, comment_id: UUID) -> Optional[Comment]:
        """Get comment by ID"""
        stmt = select(Comment).where(Comment.id == comment_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Comment]:
        stmt = select(Comment).order_by(Comment.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_user_id(self, user_id: UUID) -> List[Comment]:
        """Get all comments written by a user"""
        stmt = (
            select(Comment)
            .where(Comment.user_id == user_id)
            .order_by(Comment.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_post_id(self, post_id: UUID) -> List[Comment]:
        """Get all comments left on a post"""
        stmt = (
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, comment: Comment) -> Comment:
        """Create a new comment"""
        self.session.add(comment)
        await self.session.flush()
        await self.session.refresh(comment)
        return comment

    async def update(self, comment: Comment) -> Comment:
        """Update existing comment"""
        self.session.add(comment)
        await self.session.flush()
        await self.session.refresh(comment)
        return comment

    async def delete(self, comment: Comment) -> None:
        await self.session.delete(comment)
        await self.session.flush()
