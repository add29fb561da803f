from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PostDetailResponse


class GetPostUseCase:
    """Load one post with its comments (public)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, post_id: UUID) -> Result[PostDetailResponse]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)
            if post is None:
                return Return.err(Error("POST_NOT_FOUND", "Post not found"))

            comments = await self.uow.comments.list_by_post_id(post.id)
            return Return.ok(PostDetailResponse.build(post, comments))
