"""
Login Use Case

Checks credentials and issues a bearer token.
"""

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LoginCommand, LoginResponse


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Unknown email and wrong password return the same error
    - Token carries the user ID and expires after the configured TTL
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenService):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: LoginCommand with normalized email and plain text password

        Returns:
            Result with LoginResponse containing the access token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                # Hash check against a dummy digest to maintain constant time
                await self.hasher.verify_dummy_async(command.password)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            password_valid = await self.hasher.verify_async(
                command.password, user.password_hash
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            access_token = self.tokens.issue(str(user.id))

            return Return.ok(
                LoginResponse(
                    access_token=access_token,
                    expires_in=int(self.tokens.ttl.total_seconds()),
                )
            )
