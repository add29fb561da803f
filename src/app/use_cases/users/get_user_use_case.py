from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import UserDetailResponse


class GetUserUseCase:
    """Load one user with their posts and comments (public)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserDetailResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            posts = await self.uow.posts.list_by_user_id(user.id)
            comments = await self.uow.comments.list_by_user_id(user.id)
            return Return.ok(UserDetailResponse.build(user, posts, comments))
