"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from domain.entities.profile import Profile
from domain.entities.user import UserSummary
from infrastructure.database.models import ProfileModel, UserModel
from infrastructure.database.repositories.documents import (
    education_from_doc,
    education_to_doc,
    experience_from_doc,
    experience_to_doc,
)


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user, with name and avatar populated."""
        stmt = (
            select(ProfileModel, UserModel)
            .join(UserModel, ProfileModel.user_id == UserModel.id)
            .where(ProfileModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        return self._to_entity(row[0], row[1]) if row else None

    async def get_all(self) -> list[Profile]:
        """Get all profiles."""
        stmt = (
            select(ProfileModel, UserModel)
            .join(UserModel, ProfileModel.user_id == UserModel.id)
            .order_by(ProfileModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(profile, user) for profile, user in result]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(id=profile.id, user_id=profile.user_id, created_at=profile.created_at)
        self._apply(model, profile)
        self._session.add(model)
        await self._session.flush()
        created = await self.get_by_user(profile.user_id)
        if created is None:
            raise ValueError(f"Profile for user {profile.user_id} not found after insert")
        return created

    async def save(self, profile: Profile) -> Profile:
        """Write back every field, checking the version read earlier."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == profile.user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if not model or model.version != profile.version:
            raise StaleDataError(f"Profile {profile.id} changed since it was read")

        self._apply(model, profile)
        await self._session.flush()

        saved = await self.get_by_user(profile.user_id)
        if saved is None:
            raise ValueError(f"Profile for user {profile.user_id} not found after update")
        return saved

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _apply(self, model: ProfileModel, entity: Profile) -> None:
        """Copy entity fields onto the ORM model. Lists are rebuilt so JSON changes are tracked."""
        model.company = entity.company
        model.website = entity.website
        model.location = entity.location
        model.status = entity.status
        model.bio = entity.bio
        model.github_username = entity.github_username
        model.skills = list(entity.skills)
        model.social = dict(entity.social)
        model.experience = [experience_to_doc(entry) for entry in entity.experience]
        model.education = [education_to_doc(entry) for entry in entity.education]

    def _to_entity(self, model: ProfileModel, user: UserModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            company=model.company,
            website=model.website,
            location=model.location,
            status=model.status,
            bio=model.bio,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=dict(model.social or {}),
            experience=[experience_from_doc(doc) for doc in model.experience or []],
            education=[education_from_doc(doc) for doc in model.education or []],
            created_at=model.created_at,
            version=model.version,
            user=UserSummary(id=user.id, name=user.name, avatar_url=user.avatar_url),
        )
