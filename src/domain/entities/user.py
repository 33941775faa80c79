"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Registered identity. Only the password hash may change after creation."""

    name: str
    email: str
    password_hash: str
    avatar_url: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class UserSummary:
    """Read-only name/avatar pair joined onto profiles."""

    id: UUID
    name: str
    avatar_url: str
