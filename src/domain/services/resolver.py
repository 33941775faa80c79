"""Resource loading with not-found vs malformed-id classification."""

from enum import StrEnum
from uuid import UUID

import structlog

from core.exceptions import (
    AppException,
    MalformedIdError,
    PostNotFoundError,
    ProfileNotFoundError,
)
from domain.entities.post import Post
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ResourceKind(StrEnum):
    POST = "post"
    PROFILE = "profile"


def _not_found(kind: ResourceKind, raw_id: str) -> AppException:
    if kind is ResourceKind.POST:
        return PostNotFoundError(raw_id)
    return ProfileNotFoundError(raw_id)


def parse_id(kind: ResourceKind, raw_id: str | UUID) -> UUID:
    """Parse a raw identifier, raising MalformedIdError if it is not a UUID."""
    if isinstance(raw_id, UUID):
        return raw_id
    try:
        return UUID(raw_id)
    except (ValueError, TypeError, AttributeError):
        logger.warning("malformed_resource_id", kind=kind.value, raw_id=raw_id)
        raise MalformedIdError(_not_found(kind, str(raw_id)), str(raw_id)) from None


async def resolve_post(uow: IUnitOfWork, raw_id: str | UUID) -> Post:
    """Load a post by primary key."""
    post_id = parse_id(ResourceKind.POST, raw_id)
    post = await uow.posts.get(post_id)
    if post is None:
        logger.info("resource_not_found", kind=ResourceKind.POST.value, id=str(post_id))
        raise PostNotFoundError(str(post_id))
    return post


async def resolve_profile(uow: IUnitOfWork, raw_user_id: str | UUID) -> Profile:
    """Load a profile by its owner's user id."""
    user_id = parse_id(ResourceKind.PROFILE, raw_user_id)
    profile = await uow.profiles.get_by_user(user_id)
    if profile is None:
        logger.info("resource_not_found", kind=ResourceKind.PROFILE.value, id=str(user_id))
        raise ProfileNotFoundError(str(user_id))
    return profile


async def resolve(uow: IUnitOfWork, kind: ResourceKind, raw_id: str | UUID) -> Post | Profile:
    """Load a resource of ``kind``.

    Store errors propagate; the unit of work turns them into StoreFailureError.
    """
    if kind is ResourceKind.POST:
        return await resolve_post(uow, raw_id)
    return await resolve_profile(uow, raw_id)
