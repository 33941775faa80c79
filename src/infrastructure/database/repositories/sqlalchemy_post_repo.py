"""SQLAlchemy implementation of Post repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from domain.entities.post import Post
from infrastructure.database.models import PostModel
from infrastructure.database.repositories.documents import (
    comment_from_doc,
    comment_to_doc,
    like_from_doc,
    like_to_doc,
)


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        stmt = select(PostModel).order_by(PostModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = PostModel(
            id=post.id,
            user_id=post.user_id,
            text=post.text,
            name=post.name,
            avatar_url=post.avatar_url,
            likes=[like_to_doc(like) for like in post.likes],
            comments=[comment_to_doc(comment) for comment in post.comments],
            created_at=post.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def save(self, post: Post) -> Post:
        """Write back likes and comments, checking the version read earlier."""
        model = await self._get_model(post.id)
        if not model or model.version != post.version:
            raise StaleDataError(f"Post {post.id} changed since it was read")

        # Reassign so the JSON columns are flagged dirty
        model.likes = [like_to_doc(like) for like in post.likes]
        model.comments = [comment_to_doc(comment) for comment in post.comments]

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a post."""
        stmt = delete(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every post authored by a user."""
        stmt = delete(PostModel).where(PostModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0

    async def _get_model(self, id: UUID) -> PostModel | None:
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar_url=model.avatar_url,
            likes=[like_from_doc(doc) for doc in model.likes or []],
            comments=[comment_from_doc(doc) for doc in model.comments or []],
            created_at=model.created_at,
            version=model.version,
        )
