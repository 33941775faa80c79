"""Unit tests for UserService."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from core.exceptions import (
    AuthenticationError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from domain.entities.user import User
from domain.services.user_service import UserService
from infrastructure.auth.passwords import hash_password, verify_password


@pytest.fixture
def tokens() -> MagicMock:
    provider = MagicMock()
    provider.issue.return_value = "signed-token"
    return provider


@pytest.fixture
def service(uow, tokens) -> UserService:
    return UserService(lambda: uow, token_provider=tokens)


class TestRegister:
    async def test_returns_token_for_new_user(self, service, uow, tokens):
        uow.users.get_by_email.return_value = None

        token = await service.register("Ada", "ada@example.com", "secret123")

        assert token == "signed-token"
        created: User = uow.users.create.await_args.args[0]
        tokens.issue.assert_called_once_with(created.id)
        assert uow.committed

    async def test_hashes_password(self, service, uow):
        uow.users.get_by_email.return_value = None

        await service.register("Ada", "ada@example.com", "secret123")

        created: User = uow.users.create.await_args.args[0]
        assert created.password_hash != "secret123"
        assert verify_password("secret123", created.password_hash)

    async def test_sets_gravatar(self, service, uow):
        uow.users.get_by_email.return_value = None

        await service.register("Ada", "Ada@Example.com", "secret123")

        created: User = uow.users.create.await_args.args[0]
        assert created.avatar_url.startswith("https://www.gravatar.com/avatar/")

    async def test_duplicate_email(self, service, uow, author):
        uow.users.get_by_email.return_value = author

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            await service.register("Ada", author.email, "secret123")

        assert exc_info.value.as_errors_list
        uow.users.create.assert_not_awaited()


class TestAuthenticate:
    async def test_valid_credentials(self, service, uow, tokens, author):
        author.password_hash = hash_password("secret123")
        uow.users.get_by_email.return_value = author

        token = await service.authenticate(author.email, "secret123")

        assert token == "signed-token"
        tokens.issue.assert_called_once_with(author.id)

    async def test_wrong_password(self, service, uow, author):
        author.password_hash = hash_password("secret123")
        uow.users.get_by_email.return_value = author

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate(author.email, "wrong-password")

    async def test_unknown_email(self, service, uow):
        uow.users.get_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("nobody@example.com", "secret123")


class TestGetById:
    async def test_found(self, service, uow, author):
        uow.users.get.return_value = author

        assert await service.get_by_id(author.id) is author

    async def test_deleted_account(self, service, uow):
        uow.users.get.return_value = None

        with pytest.raises(AuthenticationError) as exc_info:
            await service.get_by_id(uuid4())

        assert exc_info.value.message == "Token is not valid"


class TestDeleteAccount:
    async def test_removes_posts_profile_and_user(self, service, uow, user_id):
        uow.posts.delete_all_for_user.return_value = 2

        await service.delete_account(user_id)

        uow.posts.delete_all_for_user.assert_awaited_once_with(user_id)
        uow.profiles.delete_for_user.assert_awaited_once_with(user_id)
        uow.users.delete.assert_awaited_once_with(user_id)
        assert uow.committed
