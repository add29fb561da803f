from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CommentResponse
from .loader import load_comment_response


class GetCommentUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, comment_id: UUID) -> Result[CommentResponse]:
        async with self.uow:
            comment = await self.uow.comments.get_by_id(comment_id)
            if comment is None:
                return Return.err(Error("COMMENT_NOT_FOUND", "Comment not found"))
            return Return.ok(await load_comment_response(self.uow, comment))
