import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import authorize_owner_action
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CommentResponse
from .loader import load_comment_response

logger = logging.getLogger(__name__)


class DeleteCommentUseCase:
    """
    Delete a comment.

    Business Rules:
    - Comment must exist (COMMENT_NOT_FOUND)
    - Only the comment's owner may delete it (OWNERSHIP_MISMATCH)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, requester_id: str, comment_id: UUID) -> Result[CommentResponse]:
        async with self.uow:
            comment = await self.uow.comments.get_by_id(comment_id)
            if comment is None:
                return Return.err(Error("COMMENT_NOT_FOUND", "Comment not found"))

            decision = authorize_owner_action(requester_id, comment.user_id)
            if decision.is_err():
                logger.warning(
                    "User %s denied deletion of comment %s", requester_id, comment_id
                )
                return decision

            response = await load_comment_response(self.uow, comment)

            await self.uow.comments.delete(comment)
            await self.uow.commit()

            return Return.ok(response)
