"""Unit tests for the resource resolver."""

from uuid import uuid4

import pytest

from core.exceptions import (
    ErrorCode,
    MalformedIdError,
    PostNotFoundError,
    ProfileNotFoundError,
)
from domain.services.resolver import (
    ResourceKind,
    parse_id,
    resolve,
    resolve_post,
    resolve_profile,
)


class TestParseId:
    def test_parses_uuid_string(self):
        value = uuid4()

        assert parse_id(ResourceKind.POST, str(value)) == value

    def test_passes_uuid_through(self):
        value = uuid4()

        assert parse_id(ResourceKind.POST, value) is value

    def test_malformed_post_id_looks_like_not_found(self):
        with pytest.raises(MalformedIdError) as exc_info:
            parse_id(ResourceKind.POST, "123")

        assert exc_info.value.error_code == ErrorCode.MALFORMED_ID
        assert exc_info.value.message == "Post not found"
        assert exc_info.value.status_code == 404

    def test_malformed_profile_id_looks_like_not_found(self):
        with pytest.raises(MalformedIdError) as exc_info:
            parse_id(ResourceKind.PROFILE, "abc")

        assert exc_info.value.message == "Profile not found"
        assert exc_info.value.status_code == 400


class TestResolvePost:
    async def test_returns_post(self, uow, post):
        uow.posts.get.return_value = post

        result = await resolve_post(uow, str(post.id))

        assert result is post
        uow.posts.get.assert_awaited_once_with(post.id)

    async def test_missing_post(self, uow):
        uow.posts.get.return_value = None

        with pytest.raises(PostNotFoundError) as exc_info:
            await resolve_post(uow, str(uuid4()))

        assert exc_info.value.status_code == 404

    async def test_malformed_id_skips_store(self, uow):
        with pytest.raises(MalformedIdError):
            await resolve_post(uow, "nope")

        uow.posts.get.assert_not_awaited()


class TestResolveProfile:
    async def test_returns_profile(self, uow, profile, user_id):
        uow.profiles.get_by_user.return_value = profile

        result = await resolve_profile(uow, str(user_id))

        assert result is profile
        uow.profiles.get_by_user.assert_awaited_once_with(user_id)

    async def test_missing_profile(self, uow):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError) as exc_info:
            await resolve_profile(uow, str(uuid4()))

        assert exc_info.value.message == "Profile not found"


class TestResolve:
    async def test_dispatches_on_kind(self, uow, post, profile, user_id):
        uow.posts.get.return_value = post
        uow.profiles.get_by_user.return_value = profile

        assert await resolve(uow, ResourceKind.POST, post.id) is post
        assert await resolve(uow, ResourceKind.PROFILE, user_id) is profile

    async def test_store_errors_propagate(self, uow):
        uow.posts.get.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError):
            await resolve(uow, ResourceKind.POST, uuid4())
