"""Post domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class Like:
    """Membership of a user in a post's like set."""

    user_id: UUID


@dataclass(frozen=True, slots=True)
class Comment:
    """Comment on a post. Name and avatar are copied when it is written."""

    user_id: UUID
    text: str
    name: str
    avatar_url: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a Post."""

    user_id: UUID
    text: str
    name: str
    avatar_url: str
    id: UUID = field(default_factory=uuid4)
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    version: int = 1

    @property
    def owner_id(self) -> UUID:
        return self.user_id
