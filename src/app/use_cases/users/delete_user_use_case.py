"""
Delete User Use Case

Deletes the caller's own account together with everything it owns.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import authorize_owner_action
from src.app.services.unit_of_work import UnitOfWork
from .dtos import UserResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for account deletion.

    Business Rules:
    - Only the account owner may delete the account
    - Cascade: the user's comments, comments on the user's posts,
      the user's posts, then the user row, in one transaction
    - No token revocation: outstanding tokens stay valid until expiry
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, requester_id: str, user_id: UUID) -> Result[UserResponse]:
        decision = authorize_owner_action(requester_id, user_id)
        if decision.is_err():
            logger.warning("User %s denied deletion of account %s", requester_id, user_id)
            return decision

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            response = UserResponse.from_entity(user)

            for comment in await self.uow.comments.list_by_user_id(user.id):
                await self.uow.comments.delete(comment)

            for post in await self.uow.posts.list_by_user_id(user.id):
                for comment in await self.uow.comments.list_by_post_id(post.id):
                    await self.uow.comments.delete(comment)
                await self.uow.posts.delete(post)

            await self.uow.users.delete(user)

            await self.uow.commit()
            logger.info("User deleted: %s", user_id)

            return Return.ok(response)
