"""Login and current-user routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUserId
from api.v1.dependencies import get_user_service
from api.v1.schemas.common import ErrorListResponse, ErrorResponse
from api.v1.schemas.user import TokenResponse, UserLogin, UserResponse
from core.rate_limit import limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserResponse,
    summary="Get the authenticated user",
    responses={401: {"model": ErrorResponse, "description": "Missing or invalid token"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_me(
    request: Request,
    user_id: CurrentUserId,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return the user the token belongs to, without the password."""
    user = await service.get_by_id(user_id)
    return UserResponse.from_entity(user)


@router.post(
    "",
    response_model=TokenResponse,
    summary="Log in",
    responses={400: {"model": ErrorListResponse, "description": "Invalid credentials"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: UserLogin,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange email and password for a token."""
    token = await service.authenticate(email=body.email, password=body.password)
    return TokenResponse(token=token)
