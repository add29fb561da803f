from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import UserDetailResponse


class ListUsersUseCase:
    """List every user with their posts and comments (public)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[UserDetailResponse]]:
        async with self.uow:
            users = await self.uow.users.list_all()
            response = []
            for user in users:
                posts = await self.uow.posts.list_by_user_id(user.id)
                comments = await self.uow.comments.list_by_user_id(user.id)
                response.append(UserDetailResponse.build(user, posts, comments))
            return Return.ok(response)
