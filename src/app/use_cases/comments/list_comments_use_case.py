from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CommentResponse
from .loader import load_comment_response


class ListCommentsUseCase:
    """List every comment with author email and post title (public)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[CommentResponse]]:
        async with self.uow:
            comments = await self.uow.comments.list_all()
            return Return.ok(
                [await load_comment_response(self.uow, c) for c in comments]
            )
