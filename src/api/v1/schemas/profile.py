"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.profile import EducationEntry, ExperienceEntry, Profile
from domain.services.profile_service import ProfileFields


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    ``skills`` is a comma-separated string.
    """

    status: str = Field(..., min_length=1)
    skills: str = Field(..., min_length=1)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def to_fields(self) -> ProfileFields:
        return ProfileFields(
            status=self.status,
            skills=self.skills,
            company=self.company,
            website=self.website,
            location=self.location,
            bio=self.bio,
            github_username=self.githubusername,
            social={
                "youtube": self.youtube,
                "twitter": self.twitter,
                "facebook": self.facebook,
                "linkedin": self.linkedin,
                "instagram": self.instagram,
            },
        )


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    location: str | None = None
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    def to_entry(self) -> ExperienceEntry:
        return ExperienceEntry(
            title=self.title,
            company=self.company,
            location=self.location,
            from_date=self.from_date,
            to_date=self.to_date,
            current=self.current,
            description=self.description,
        )


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(..., min_length=1)
    degree: str = Field(..., min_length=1)
    fieldofstudy: str = Field(..., min_length=1)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    def to_entry(self) -> EducationEntry:
        return EducationEntry(
            school=self.school,
            degree=self.degree,
            field_of_study=self.fieldofstudy,
            from_date=self.from_date,
            to_date=self.to_date,
            current=self.current,
            description=self.description,
        )


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool
    description: str | None = None

    @classmethod
    def from_entity(cls, entry: ExperienceEntry) -> "ExperienceResponse":
        return cls(
            id=entry.id,
            title=entry.title,
            company=entry.company,
            location=entry.location,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class EducationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool
    description: str | None = None

    @classmethod
    def from_entity(cls, entry: EducationEntry) -> "EducationResponse":
        return cls(
            id=entry.id,
            school=entry.school,
            degree=entry.degree,
            fieldofstudy=entry.field_of_study,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class ProfileUserResponse(BaseModel):
    """Owner's name and avatar, joined onto every profile read."""

    id: UUID
    name: str
    avatar: str


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    id: UUID
    user: ProfileUserResponse | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    status: str
    skills: list[str]
    bio: str | None = None
    githubusername: str | None = None
    social: dict[str, str]
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    date: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        user = None
        if profile.user:
            user = ProfileUserResponse(
                id=profile.user.id,
                name=profile.user.name,
                avatar=profile.user.avatar_url,
            )
        return cls(
            id=profile.id,
            user=user,
            company=profile.company,
            website=profile.website,
            location=profile.location,
            status=profile.status,
            skills=profile.skills,
            bio=profile.bio,
            githubusername=profile.github_username,
            social=profile.social,
            experience=[ExperienceResponse.from_entity(e) for e in profile.experience],
            education=[EducationResponse.from_entity(e) for e in profile.education],
            date=profile.created_at,
        )
