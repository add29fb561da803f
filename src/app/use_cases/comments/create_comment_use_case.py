"""
Create Comment Use Case

Adds a comment, owned by the authenticated caller, to an existing post.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import authorize_owner_action
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Comment
from .dtos import CommentResponse, CreateCommentCommand

logger = logging.getLogger(__name__)


class CreateCommentUseCase:
    """
    Business Rules:
    - The declared owner (command.user_id) must be the caller; defaults to the caller
    - The owning account must still exist (USER_NOT_FOUND)
    - The target post must exist (POST_NOT_FOUND)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_id: str, command: CreateCommentCommand
    ) -> Result[CommentResponse]:
        owner_id = command.user_id if command.user_id is not None else requester_id

        decision = authorize_owner_action(requester_id, owner_id)
        if decision.is_err():
            logger.warning(
                "User %s denied creating a comment as %s", requester_id, owner_id
            )
            return decision

        async with self.uow:
            owner = await self.uow.users.get_by_id(UUID(str(owner_id)))
            if owner is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            post = await self.uow.posts.get_by_id(command.post_id)
            if post is None:
                return Return.err(Error("POST_NOT_FOUND", "Post not found"))

            comment = Comment(content=command.content, user_id=owner.id, post_id=post.id)
            comment = await self.uow.comments.create(comment)

            await self.uow.commit()

            return Return.ok(CommentResponse.build(comment, owner, post))
