"""Pydantic schemas for Post API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.post import Comment, Like, Post


class PostCreate(BaseModel):
    """Schema for creating a Post."""

    text: str = Field(..., min_length=1)


class CommentCreate(BaseModel):
    """Schema for commenting on a Post."""

    text: str = Field(..., min_length=1)


class LikeResponse(BaseModel):
    """One entry of a post's likes."""

    user: UUID

    @classmethod
    def from_entity(cls, like: Like) -> "LikeResponse":
        return cls(user=like.user_id)


class CommentResponse(BaseModel):
    """Schema for Comment response."""

    id: UUID
    user: UUID
    text: str
    name: str
    avatar: str
    date: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            user=comment.user_id,
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar_url,
            date=comment.created_at,
        )


class PostResponse(BaseModel):
    """Schema for Post response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "user": "456e4567-e89b-12d3-a456-426614174000",
                "text": "Hello world",
                "name": "Ada",
                "avatar": "https://www.gravatar.com/avatar/abc?s=200&r=pg&d=mm",
                "likes": [],
                "comments": [],
                "date": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user: UUID
    text: str
    name: str
    avatar: str
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    date: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            user=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar_url,
            likes=[LikeResponse.from_entity(like) for like in post.likes],
            comments=[CommentResponse.from_entity(comment) for comment in post.comments],
            date=post.created_at,
        )
