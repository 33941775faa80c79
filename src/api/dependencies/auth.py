"""Authentication dependencies for FastAPI."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from core.config import settings
from core.exceptions import AuthenticationError, ErrorCode, InvalidTokenError
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenClaim

# Security scheme for OpenAPI docs; the raw token travels in a fixed header
token_header = APIKeyHeader(name=settings.auth_header_name, auto_error=False)

# Singleton token provider
_auth_provider: JWTAuthProvider | None = None


def get_auth_provider() -> JWTAuthProvider:
    """Get or create the token provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = JWTAuthProvider()
    return _auth_provider


async def get_current_claim(
    request: Request,
    token: Annotated[str | None, Depends(token_header)],
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> TokenClaim:
    """
    Dependency guarding protected routes.

    Runs before any resource lookup and never touches the store. On
    success the user id is attached to the request state and the log
    context.

    Raises:
        AuthenticationError: If no token provided or token is invalid
    """
    if not token:
        raise AuthenticationError(
            message="No token,auth denied",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    try:
        claim = auth_provider.verify(token)
    except InvalidTokenError:
        raise AuthenticationError(
            message="Token is not valid",
            error_code=ErrorCode.INVALID_TOKEN,
        ) from None

    request.state.user_id = claim.user_id
    structlog.contextvars.bind_contextvars(user_id=str(claim.user_id))
    return claim


async def get_current_user_id(
    claim: Annotated[TokenClaim, Depends(get_current_claim)],
) -> UUID:
    """Dependency returning just the authenticated user's id."""
    return claim.user_id


# Type alias for convenience in route handlers
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
