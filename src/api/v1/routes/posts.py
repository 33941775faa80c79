"""Post API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUserId
from api.v1.dependencies import get_post_service
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.post import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    PostCreate,
    PostResponse,
)
from core.rate_limit import limiter
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Post not found"}}


@router.post(
    "",
    response_model=PostResponse,
    summary="Create a post",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostCreate,
    user_id: CurrentUserId,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Publish a post under the caller's current name and avatar."""
    post = await service.create(user_id=user_id, text=body.text)
    return PostResponse.from_entity(post)


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List all posts",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    user_id: CurrentUserId,
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """Get every post, newest first."""
    posts = await service.get_all()
    return [PostResponse.from_entity(post) for post in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses=_NOT_FOUND,
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_post(
    request: Request,
    post_id: str,
    user_id: CurrentUserId,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Get a single post by id."""
    post = await service.get_by_id(post_id)
    return PostResponse.from_entity(post)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
    responses={
        400: {"model": ErrorResponse, "description": "User not authorized"},
        **_NOT_FOUND,
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_post(
    request: Request,
    post_id: str,
    user_id: CurrentUserId,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post. Only its author may delete it."""
    await service.delete(post_id, user_id)
    return MessageResponse(msg="Post removed")


@router.put(
    "/like/{post_id}",
    response_model=list[LikeResponse],
    summary="Like a post",
    responses={
        400: {"model": ErrorResponse, "description": "Post already liked"},
        **_NOT_FOUND,
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def like_post(
    request: Request,
    post_id: str,
    user_id: CurrentUserId,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Like a post. Returns the post's likes, newest first."""
    likes = await service.like(post_id, user_id)
    return [LikeResponse.from_entity(like) for like in likes]


@router.put(
    "/unlike/{post_id}",
    response_model=list[LikeResponse],
    summary="Unlike a post",
    responses={
        400: {"model": ErrorResponse, "description": "Post not liked"},
        **_NOT_FOUND,
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def unlike_post(
    request: Request,
    post_id: str,
    user_id: CurrentUserId,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Withdraw the caller's like."""
    likes = await service.unlike(post_id, user_id)
    return [LikeResponse.from_entity(like) for like in likes]


@router.put(
    "/comment/{post_id}",
    response_model=list[CommentResponse],
    summary="Comment on a post",
    responses=_NOT_FOUND,
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_comment(
    request: Request,
    post_id: str,
    body: CommentCreate,
    user_id: CurrentUserId,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Add a comment. Returns all comments, newest first."""
    comments = await service.add_comment(post_id, user_id, body.text)
    return [CommentResponse.from_entity(comment) for comment in comments]


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=list[CommentResponse],
    summary="Delete a comment",
    responses={
        400: {"model": ErrorResponse, "description": "User not authorized"},
        **_NOT_FOUND,
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_comment(
    request: Request,
    post_id: str,
    comment_id: str,
    user_id: CurrentUserId,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Delete a comment. Allowed for the post's author; unknown comment ids are ignored."""
    comments = await service.delete_comment(post_id, comment_id, user_id)
    return [CommentResponse.from_entity(comment) for comment in comments]
