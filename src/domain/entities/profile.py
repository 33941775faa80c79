"""Profile domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

from domain.entities.user import UserSummary

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


@dataclass(frozen=True, slots=True)
class ExperienceEntry:
    """Employment history entry."""

    title: str
    company: str
    from_date: date
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True, slots=True)
class EducationEntry:
    """Education history entry."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None
    id: UUID = field(default_factory=uuid4)


@dataclass
class Profile:
    """Domain entity for a user profile. One per user."""

    user_id: UUID
    status: str
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str] = field(default_factory=list)
    social: dict[str, str] = field(default_factory=dict)
    experience: list[ExperienceEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    version: int = 1
    # Populated on reads; never persisted with the profile
    user: UserSummary | None = None

    @property
    def owner_id(self) -> UUID:
        return self.user_id


def parse_skills(raw: str) -> list[str]:
    """Split a comma-separated skills string into trimmed, non-empty items.

    Repeated skills keep their first position only.
    """
    skills = (skill.strip() for skill in raw.split(","))
    return list(dict.fromkeys(skill for skill in skills if skill))
