"""Post service layer: posts, likes and comments."""

from collections.abc import Callable
from dataclasses import replace
from uuid import UUID, uuid4

import structlog

from core.exceptions import (
    AlreadyLikedError,
    AuthenticationError,
    ErrorCode,
    NotLikedError,
)
from domain.entities.post import Comment, Like, Post
from domain.entities.user import User
from domain.policies.ownership import Mutation, require_owner
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import list_mutations
from domain.services.resolver import resolve_post

logger = structlog.get_logger()


def _like_user(like: Like) -> UUID:
    return like.user_id


class PostService:
    """Service layer for Post business logic.

    Every mutation is read, mutate in memory, save. The save carries the
    version that was read, so a concurrent writer causes a conflict
    error rather than a lost update.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, user_id: UUID, text: str) -> Post:
        """Create a post, copying the author's current name and avatar."""
        async with self._uow_factory() as uow:
            author = await self._get_author(uow, user_id)
            post = Post(
                user_id=user_id,
                text=text,
                name=author.name,
                avatar_url=author.avatar_url,
            )
            created = await uow.posts.create(post)
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
        return created

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()

    async def get_by_id(self, post_id: str | UUID) -> Post:
        async with self._uow_factory() as uow:
            return await resolve_post(uow, post_id)

    async def delete(self, post_id: str | UUID, user_id: UUID) -> None:
        """Delete a post. Only its author may do this."""
        async with self._uow_factory() as uow:
            post = await resolve_post(uow, post_id)
            require_owner(Mutation.DELETE_POST, post.owner_id, user_id)
            await uow.posts.delete(post.id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post.id), user_id=str(user_id))

    async def like(self, post_id: str | UUID, user_id: UUID) -> list[Like]:
        """Add the user to the post's likes. Open to any authenticated user."""
        async with self._uow_factory() as uow:
            post = await resolve_post(uow, post_id)
            require_owner(Mutation.LIKE_POST, post.owner_id, user_id)
            post.likes = list_mutations.add_member(
                post.likes,
                Like(user_id=user_id),
                key=_like_user,
                on_duplicate=lambda: AlreadyLikedError(str(post.id)),
            )
            saved = await uow.posts.save(post)
            await uow.commit()

        logger.info("post_liked", post_id=str(saved.id), user_id=str(user_id))
        return saved.likes

    async def unlike(self, post_id: str | UUID, user_id: UUID) -> list[Like]:
        """Remove the user from the post's likes."""
        async with self._uow_factory() as uow:
            post = await resolve_post(uow, post_id)
            require_owner(Mutation.UNLIKE_POST, post.owner_id, user_id)
            post.likes = list_mutations.remove_member(
                post.likes,
                user_id,
                key=_like_user,
                on_missing=lambda: NotLikedError(str(post.id)),
            )
            saved = await uow.posts.save(post)
            await uow.commit()

        logger.info("post_unliked", post_id=str(saved.id), user_id=str(user_id))
        return saved.likes

    async def add_comment(self, post_id: str | UUID, user_id: UUID, text: str) -> list[Comment]:
        """Put a new comment at the top of the post's comments."""
        async with self._uow_factory() as uow:
            post = await resolve_post(uow, post_id)
            require_owner(Mutation.ADD_COMMENT, post.owner_id, user_id)
            author = await self._get_author(uow, user_id)

            taken = {comment.id for comment in post.comments}
            comment = Comment(
                user_id=user_id,
                text=text,
                name=author.name,
                avatar_url=author.avatar_url,
            )
            while comment.id in taken:
                comment = replace(comment, id=uuid4())

            post.comments = list_mutations.prepend(post.comments, comment)
            saved = await uow.posts.save(post)
            await uow.commit()

        logger.info(
            "comment_added",
            post_id=str(saved.id),
            comment_id=str(comment.id),
            user_id=str(user_id),
        )
        return saved.comments

    async def delete_comment(
        self, post_id: str | UUID, comment_id: str, user_id: UUID
    ) -> list[Comment]:
        """Remove a comment. Authorized against the post's owner.

        An unknown ``comment_id`` leaves the comments untouched and still
        succeeds.
        """
        async with self._uow_factory() as uow:
            post = await resolve_post(uow, post_id)
            require_owner(Mutation.DELETE_COMMENT, post.owner_id, user_id)
            before = len(post.comments)
            post.comments = list_mutations.remove_by_id(post.comments, comment_id)
            saved = await uow.posts.save(post)
            await uow.commit()

        logger.info(
            "comment_removed",
            post_id=str(saved.id),
            comment_id=comment_id,
            removed=before - len(saved.comments),
        )
        return saved.comments

    async def _get_author(self, uow: IUnitOfWork, user_id: UUID) -> User:
        author = await uow.users.get(user_id)
        if not author:
            raise AuthenticationError("Token is not valid", ErrorCode.INVALID_TOKEN)
        return author
