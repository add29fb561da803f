"""
Create Post Use Case

Publishes a post owned by the authenticated caller.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import authorize_owner_action
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Post
from .dtos import CreatePostCommand, PostResponse

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """
    Business Rules:
    - The declared owner (command.user_id) must be the caller; defaults to the caller
    - The owning account must still exist (tokens outlive deleted accounts)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_id: str, command: CreatePostCommand
    ) -> Result[PostResponse]:
        owner_id = command.user_id if command.user_id is not None else requester_id

        decision = authorize_owner_action(requester_id, owner_id)
        if decision.is_err():
            logger.warning("User %s denied creating a post as %s", requester_id, owner_id)
            return decision

        async with self.uow:
            owner = await self.uow.users.get_by_id(UUID(str(owner_id)))
            if owner is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            post = Post(title=command.title, content=command.content, user_id=owner.id)
            post = await self.uow.posts.create(post)

            await self.uow.commit()

            return Return.ok(PostResponse.from_entity(post))
