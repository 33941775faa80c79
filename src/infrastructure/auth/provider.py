"""Token provider protocol."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class TokenClaim:
    """Identity claim embedded in a signed token."""

    user_id: UUID
    issued_at: datetime
    expires_at: datetime


class ITokenProvider(Protocol):
    """Protocol for token signing/verification, so the algorithm can be swapped."""

    def sign(self, claim: TokenClaim) -> str:
        """
        Sign a claim into a token.

        Args:
            claim: The claim to embed

        Returns:
            The generated token string
        """
        ...

    def verify(self, token: str) -> TokenClaim:
        """
        Verify a token and extract its claim.

        Args:
            token: The raw token string

        Returns:
            The embedded TokenClaim

        Raises:
            InvalidTokenError: On any structural, signature or expiry failure
        """
        ...

    def issue(self, user_id: UUID) -> str:
        """Build a fresh claim for ``user_id`` and sign it."""
        ...
