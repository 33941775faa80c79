"""JWT token provider implementation.

Token payload structure:
    {
        "sub": "user-uuid",
        "iat": 1234567890,
        "exp": 1234567890
    }
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import JWTError, jwt

from core.config import settings
from core.exceptions import InvalidTokenError
from infrastructure.auth.provider import TokenClaim

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """HS256 JWT provider signing with a shared secret."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def sign(self, claim: TokenClaim) -> str:
        """Encode a claim as a signed JWT."""
        payload = {
            "sub": str(claim.user_id),
            "iat": claim.issued_at,
            "exp": claim.expires_at,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaim:
        """
        Validate a JWT and extract its claim.

        Malformed, badly signed, expired and incomplete tokens all raise
        the same InvalidTokenError.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_aud": False},
            )
        except JWTError as e:
            logger.debug("JWT rejected: %s", e)
            raise InvalidTokenError(str(e)) from e

        try:
            user_id = UUID(payload["sub"])
            issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("Token is missing required claims") from e

        return TokenClaim(user_id=user_id, issued_at=issued_at, expires_at=expires_at)

    def issue(self, user_id: UUID) -> str:
        """Create and sign a claim for a user valid for the configured lifetime."""
        now = datetime.now(timezone.utc).replace(microsecond=0)
        claim = TokenClaim(
            user_id=user_id,
            issued_at=now,
            expires_at=now + timedelta(minutes=self._expire_minutes),
        )
        return self.sign(claim)
