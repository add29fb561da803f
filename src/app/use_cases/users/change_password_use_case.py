"""
Change Password Use Case

Replaces the password hash of the caller's own account.
"""

import logging
from datetime import UTC, datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import authorize_owner_action
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ChangePasswordCommand, UserResponse

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing an account password.

    Business Rules:
    - Only the account owner may change the password
    - New password is stored as a fresh bcrypt hash
    - Tokens issued before the change stay valid until they expire
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(
        self, requester_id: str, user_id: UUID, command: ChangePasswordCommand
    ) -> Result[UserResponse]:
        """
        Args:
            requester_id: User ID from the verified token
            user_id: Account to update (path parameter)
            command: New password

        Returns:
            Result with updated UserResponse, or Error
            (OWNERSHIP_MISMATCH, USER_NOT_FOUND)
        """
        decision = authorize_owner_action(requester_id, user_id)
        if decision.is_err():
            logger.warning("User %s denied password change on %s", requester_id, user_id)
            return decision

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.password_hash = await self.hasher.hash_async(command.password)
            user.updated_at = datetime.now(UTC)
            user = await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(UserResponse.from_entity(user))
