import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import authorize_owner_action
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PostDetailResponse

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """
    Delete a post and its comments.

    Business Rules:
    - Post must exist (POST_NOT_FOUND)
    - Only the post's owner may delete it (OWNERSHIP_MISMATCH)
    - Returns the deleted post with the comments that were removed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, requester_id: str, post_id: UUID) -> Result[PostDetailResponse]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)
            if post is None:
                return Return.err(Error("POST_NOT_FOUND", "Post not found"))

            decision = authorize_owner_action(requester_id, post.user_id)
            if decision.is_err():
                logger.warning("User %s denied deletion of post %s", requester_id, post_id)
                return decision

            comments = await self.uow.comments.list_by_post_id(post.id)
            response = PostDetailResponse.build(post, comments)

            for comment in comments:
                await self.uow.comments.delete(comment)
            await self.uow.posts.delete(post)

            await self.uow.commit()

            return Return.ok(response)
