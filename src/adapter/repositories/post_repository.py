from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.post_repository import IPostRepository
from src.domain.entities import Post


class PostRepository(IPostRepository):
    """Post repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, post_id: UUID) -> Optional[Post]:
        """Get post by ID"""
        stmt = select(Post).where(Post.id == post_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Post]:
        stmt = select(Post).order_by(Post.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_user_id(self, user_id: UUID) -> List[Post]:
        """Get all posts written by a user"""
        stmt = select(Post).where(Post.user_id == user_id).order_by(Post.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, post: Post) -> Post:
        """Create a new post"""
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def update(self, post: Post) -> Post:
        """Update existing post"""
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def delete(self, post: Post) -> None:
        await self.session.delete(post)
        await self.session.flush()
