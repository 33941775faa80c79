"""User service layer: registration, login and account removal."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    AuthenticationError,
    ErrorCode,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.passwords import hash_password, verify_password
from infrastructure.auth.provider import ITokenProvider
from infrastructure.avatar import gravatar_url

logger = structlog.get_logger()


class UserService:
    """Service layer for User business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        token_provider: ITokenProvider,
    ) -> None:
        self._uow_factory = uow_factory
        self._tokens = token_provider

    async def register(self, name: str, email: str, password: str) -> str:
        """Create a user and return a signed token for it."""
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise UserAlreadyExistsError(email)

            user = User(
                name=name,
                email=email,
                password_hash=hash_password(password),
                avatar_url=gravatar_url(email),
            )
            created = await uow.users.create(user)
            await uow.commit()

        logger.info("user_registered", user_id=str(created.id))
        return self._tokens.issue(created.id)

    async def authenticate(self, email: str, password: str) -> str:
        """Check credentials and return a signed token."""
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()

        return self._tokens.issue(user.id)

    async def get_by_id(self, user_id: UUID) -> User:
        """Get the user a valid token points at."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)

        if not user:
            # Token outlived its account
            raise AuthenticationError("Token is not valid", ErrorCode.INVALID_TOKEN)
        return user

    async def delete_account(self, user_id: UUID) -> None:
        """Remove a user together with their profile and posts."""
        async with self._uow_factory() as uow:
            posts_deleted = await uow.posts.delete_all_for_user(user_id)
            await uow.profiles.delete_for_user(user_id)
            await uow.users.delete(user_id)
            await uow.commit()

        logger.info("user_deleted", user_id=str(user_id), posts_deleted=posts_deleted)
