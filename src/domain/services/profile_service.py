"""Profile service layer with business logic."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import NoProfileError
from domain.entities.profile import (
    SOCIAL_NETWORKS,
    EducationEntry,
    ExperienceEntry,
    Profile,
    parse_skills,
)
from domain.policies.ownership import Mutation, require_owner
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import list_mutations
from domain.services.resolver import resolve_profile

logger = structlog.get_logger()

_SCALAR_FIELDS = ("company", "website", "location", "bio", "status", "github_username")


@dataclass
class ProfileFields:
    """Fields supplied to an upsert. Empty values count as not supplied."""

    status: str | None = None
    skills: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    social: Mapping[str, str | None] = field(default_factory=dict)

    def to_updates(self) -> dict[str, Any]:
        """Build the partial update: supplied scalars, parsed skills and the social links.

        ``social`` is always part of the update, rebuilt from the links
        supplied in this call.
        """
        updates: dict[str, Any] = {
            name: getattr(self, name) for name in _SCALAR_FIELDS if getattr(self, name)
        }
        if self.skills:
            updates["skills"] = parse_skills(self.skills)
        updates["social"] = {
            network: link
            for network, link in self.social.items()
            if network in SOCIAL_NETWORKS and link
        }
        return updates


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_mine(self, user_id: UUID) -> Profile:
        """Get the authenticated user's profile."""
        async with self._uow_factory() as uow:
            return await self._require_profile(uow, user_id)

    async def get_all(self) -> list[Profile]:
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all()

    async def get_by_user(self, user_id: str | UUID) -> Profile:
        """Get a profile by its owner's id."""
        async with self._uow_factory() as uow:
            return await resolve_profile(uow, user_id)

    async def upsert(self, user_id: UUID, fields: ProfileFields) -> Profile:
        """Create the user's profile or merge the supplied fields into it.

        Last write wins between concurrent upserts that do not overlap
        in time; overlapping ones fail with a version conflict.
        """
        updates = fields.to_updates()
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if profile:
                require_owner(Mutation.UPSERT_PROFILE, profile.owner_id, user_id)
                for name, value in updates.items():
                    setattr(profile, name, value)
                result = await uow.profiles.save(profile)
                created = False
            else:
                status = updates.pop("status", "")
                result = await uow.profiles.create(
                    Profile(user_id=user_id, status=status, **updates)
                )
                created = True
            await uow.commit()

        logger.info("profile_upserted", user_id=str(user_id), created=created)
        return result

    async def add_experience(self, user_id: UUID, entry: ExperienceEntry) -> Profile:
        return await self._mutate_list(
            user_id,
            Mutation.ADD_EXPERIENCE,
            "experience",
            lambda items: list_mutations.prepend(items, entry),
        )

    async def remove_experience(self, user_id: UUID, entry_id: str) -> Profile:
        return await self._mutate_list(
            user_id,
            Mutation.REMOVE_EXPERIENCE,
            "experience",
            lambda items: list_mutations.remove_by_id(items, entry_id),
        )

    async def add_education(self, user_id: UUID, entry: EducationEntry) -> Profile:
        return await self._mutate_list(
            user_id,
            Mutation.ADD_EDUCATION,
            "education",
            lambda items: list_mutations.prepend(items, entry),
        )

    async def remove_education(self, user_id: UUID, entry_id: str) -> Profile:
        return await self._mutate_list(
            user_id,
            Mutation.REMOVE_EDUCATION,
            "education",
            lambda items: list_mutations.remove_by_id(items, entry_id),
        )

    async def _mutate_list(
        self,
        user_id: UUID,
        mutation: Mutation,
        attr: str,
        apply: Callable[[list[Any]], list[Any]],
    ) -> Profile:
        """Load the user's profile, rewrite one nested list and persist the profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            require_owner(mutation, profile.owner_id, user_id)
            setattr(profile, attr, apply(getattr(profile, attr)))
            saved = await uow.profiles.save(profile)
            await uow.commit()

        logger.info("profile_list_mutated", user_id=str(user_id), mutation=mutation.value)
        return saved

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_by_user(user_id)
        if not profile:
            raise NoProfileError(str(user_id))
        return profile
