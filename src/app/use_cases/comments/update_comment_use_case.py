import logging
from datetime import UTC, datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import authorize_owner_action
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CommentResponse, UpdateCommentCommand
from .loader import load_comment_response

logger = logging.getLogger(__name__)


class UpdateCommentUseCase:
    """
    Replace the content of a comment.

    Business Rules:
    - Comment must exist (COMMENT_NOT_FOUND)
    - Only the comment's owner may update it (OWNERSHIP_MISMATCH)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_id: str, comment_id: UUID, command: UpdateCommentCommand
    ) -> Result[CommentResponse]:
        async with self.uow:
            comment = await self.uow.comments.get_by_id(comment_id)
            if comment is None:
                return Return.err(Error("COMMENT_NOT_FOUND", "Comment not found"))

            decision = authorize_owner_action(requester_id, comment.user_id)
            if decision.is_err():
                logger.warning(
                    "User %s denied update of comment %s", requester_id, comment_id
                )
                return decision

            comment.content = command.content
            comment.updated_at = datetime.now(UTC)
            comment = await self.uow.comments.update(comment)

            await self.uow.commit()

            return Return.ok(await load_comment_response(self.uow, comment))
