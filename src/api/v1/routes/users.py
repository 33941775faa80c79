"""User registration routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_user_service
from api.v1.schemas.common import ErrorListResponse
from api.v1.schemas.user import TokenResponse, UserRegister
from core.rate_limit import limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=TokenResponse,
    summary="Register a user",
    responses={
        200: {"description": "User registered, token returned"},
        400: {"model": ErrorListResponse, "description": "Validation failed or email taken"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: UserRegister,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Register a user and return a token for immediate use."""
    token = await service.register(name=body.name, email=body.email, password=body.password)
    return TokenResponse(token=token)
