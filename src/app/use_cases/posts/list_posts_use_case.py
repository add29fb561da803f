from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PostResponse


class ListPostsUseCase:
    """List every post (public)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[PostResponse]]:
        async with self.uow:
            posts = await self.uow.posts.list_all()
            return Return.ok([PostResponse.from_entity(p) for p in posts])
