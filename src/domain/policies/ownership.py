"""Per-operation ownership rules for mutations."""

from enum import StrEnum
from uuid import UUID

from core.exceptions import ForbiddenError


class Mutation(StrEnum):
    """Mutations that change a post or profile document."""

    DELETE_POST = "delete_post"
    LIKE_POST = "like_post"
    UNLIKE_POST = "unlike_post"
    ADD_COMMENT = "add_comment"
    DELETE_COMMENT = "delete_comment"
    UPSERT_PROFILE = "upsert_profile"
    ADD_EXPERIENCE = "add_experience"
    REMOVE_EXPERIENCE = "remove_experience"
    ADD_EDUCATION = "add_education"
    REMOVE_EDUCATION = "remove_education"


# Social engagement is open to every authenticated user.
# Comment deletion is checked against the post's owner, not the comment author.
OWNER_GATED: dict[Mutation, bool] = {
    Mutation.DELETE_POST: True,
    Mutation.LIKE_POST: False,
    Mutation.UNLIKE_POST: False,
    Mutation.ADD_COMMENT: False,
    Mutation.DELETE_COMMENT: True,
    Mutation.UPSERT_PROFILE: True,
    Mutation.ADD_EXPERIENCE: True,
    Mutation.REMOVE_EXPERIENCE: True,
    Mutation.ADD_EDUCATION: True,
    Mutation.REMOVE_EDUCATION: True,
}


def check_owner(owner_id: UUID, identity_id: UUID) -> bool:
    """Return True when the identity owns the resource."""
    return owner_id == identity_id


def is_owner_gated(mutation: Mutation) -> bool:
    return OWNER_GATED[mutation]


def require_owner(mutation: Mutation, owner_id: UUID, identity_id: UUID) -> None:
    """Raise ForbiddenError if the mutation is owner-gated and the identity is not the owner."""
    if is_owner_gated(mutation) and not check_owner(owner_id, identity_id):
        raise ForbiddenError()
