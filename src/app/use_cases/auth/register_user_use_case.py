import logging

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return

from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.dtos import UserResponse
from src.domain.entities import User
from .dtos import RegisterUserCommand

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Register User Use Case

    Business Logic:
    1. Check if email already exists
    2. Hash password with bcrypt (off the event loop)
    3. Create User
    4. Commit transaction (unique constraint violation maps to EMAIL_ALREADY_EXISTS)
    5. Return the public user fields (never the hash)
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: RegisterUserCommand) -> Result[UserResponse]:
        """
        Execute register use case

        Args:
            command: RegisterUserCommand with normalized email and password

        Returns:
            Result[UserResponse] or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = await self.hasher.hash_async(command.password)

            user = User(email=command.email, password_hash=password_hash)
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # A concurrent registration took the email after the check above
                await self.uow.rollback()
                logger.warning("Registration lost race for email uniqueness")
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            logger.info("User registered: %s", user.id)

            return Return.ok(UserResponse.from_entity(user))
