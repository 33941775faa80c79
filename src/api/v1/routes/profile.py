"""Profile API routes."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUserId
from api.v1.dependencies import get_github_client, get_profile_service, get_user_service
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    ProfileResponse,
    ProfileUpsert,
)
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService
from domain.services.user_service import UserService
from infrastructure.github.client import GithubClient

router = APIRouter(prefix="/profile", tags=["profile"])

_NO_PROFILE = {400: {"model": ErrorResponse, "description": "There is no profile for this user"}}


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get the caller's profile",
    responses=_NO_PROFILE,
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user_id: CurrentUserId,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.get_mine(user_id)
    return ProfileResponse.from_entity(profile)


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update the caller's profile",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user_id: CurrentUserId,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Create the profile, or overwrite only the fields supplied.

    Social links are replaced by the ones sent in this request.
    """
    profile = await service.upsert(user_id, body.to_fields())
    return ProfileResponse.from_entity(profile)


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List all profiles",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    profiles = await service.get_all()
    return [ProfileResponse.from_entity(profile) for profile in profiles]


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get a profile by user id",
    responses={400: {"model": ErrorResponse, "description": "Profile not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.get_by_user(user_id)
    return ProfileResponse.from_entity(profile)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete the caller's account",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user_id: CurrentUserId,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete the caller's profile, posts and user record."""
    await service.delete_account(user_id)
    return MessageResponse(msg="User deleted")


@router.put(
    "/experience",
    response_model=ProfileResponse,
    summary="Add an experience entry",
    responses=_NO_PROFILE,
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceCreate,
    user_id: CurrentUserId,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.add_experience(user_id, body.to_entry())
    return ProfileResponse.from_entity(profile)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Remove an experience entry",
    responses=_NO_PROFILE,
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def remove_experience(
    request: Request,
    exp_id: str,
    user_id: CurrentUserId,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Remove an experience entry. Unknown ids leave the profile unchanged."""
    profile = await service.remove_experience(user_id, exp_id)
    return ProfileResponse.from_entity(profile)


@router.put(
    "/education",
    response_model=ProfileResponse,
    summary="Add an education entry",
    responses=_NO_PROFILE,
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_education(
    request: Request,
    body: EducationCreate,
    user_id: CurrentUserId,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.add_education(user_id, body.to_entry())
    return ProfileResponse.from_entity(profile)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Remove an education entry",
    responses=_NO_PROFILE,
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def remove_education(
    request: Request,
    edu_id: str,
    user_id: CurrentUserId,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Remove an education entry. Unknown ids leave the profile unchanged."""
    profile = await service.remove_education(user_id, edu_id)
    return ProfileResponse.from_entity(profile)


@router.get(
    "/github/{username}",
    summary="List a user's latest GitHub repositories",
    responses={404: {"model": ErrorResponse, "description": "No github account for this username"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_github_repos(
    request: Request,
    username: str,
    client: GithubClient = Depends(get_github_client),
) -> Any:
    """Forward GitHub's repository listing unchanged."""
    return await client.list_repos(username)
