"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile documents.

    Reads populate ``Profile.user`` with the owner's name and avatar.
    """

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get all profiles."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def save(self, profile: Profile) -> Profile:
        """Persist all profile fields, with the same version check as posts."""
        ...

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        ...
