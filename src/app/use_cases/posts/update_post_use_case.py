import logging
from datetime import UTC, datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import authorize_owner_action
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PostDetailResponse, UpdatePostCommand

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """
    Replace the title and content of a post.

    Business Rules:
    - Post must exist (POST_NOT_FOUND)
    - Only the post's owner may update it (OWNERSHIP_MISMATCH)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_id: str, post_id: UUID, command: UpdatePostCommand
    ) -> Result[PostDetailResponse]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)
            if post is None:
                return Return.err(Error("POST_NOT_FOUND", "Post not found"))

            decision = authorize_owner_action(requester_id, post.user_id)
            if decision.is_err():
                logger.warning("User %s denied update of post %s", requester_id, post_id)
                return decision

            post.title = command.title
            post.content = command.content
            post.updated_at = datetime.now(UTC)
            post = await self.uow.posts.update(post)

            await self.uow.commit()

            comments = await self.uow.comments.list_by_post_id(post.id)
            return Return.ok(PostDetailResponse.build(post, comments))
