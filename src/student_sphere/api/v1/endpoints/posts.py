"""Post and comment endpoints for the Student Sphere API."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Query, status

from student_sphere.api.v1.dependencies import CurrentUserDep, SessionDep
from student_sphere.core.settings import settings
from student_sphere.models import PostCategory
from student_sphere.schemas.post import (
    CommentCreate,
    CommentResponse,
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
)
from student_sphere.schemas.user import UserSummary
from student_sphere.services import posts as post_service
from student_sphere.services.posts import CommentNode, PostSummary

router = APIRouter(prefix="/posts", tags=["posts"])


def to_post_response(summary: PostSummary) -> PostResponse:
    """Convert a post summary into its API schema."""
    post = summary.post
    return PostResponse(
        id=post.id,
        title=post.title,
        description=post.description,
        category=post.category,
        subject=post.subject,
        user_id=post.user_id,
        created_at=post.created_at,
        user=UserSummary.model_validate(post.user),
        vote_score=summary.vote_score,
        comment_count=summary.comment_count,
    )


def _to_comment_response(node: CommentNode) -> CommentResponse:
    comment = node.comment
    return CommentResponse(
        id=comment.id,
        content=comment.content,
        post_id=comment.post_id,
        parent_id=comment.parent_id,
        user_id=comment.user_id,
        created_at=comment.created_at,
        user=UserSummary.model_validate(comment.user),
        vote_score=node.vote_score,
        replies=[_to_comment_response(reply) for reply in node.replies],
    )


@router.get("", response_model=PostListResponse)
async def list_posts(
    db: SessionDep,
    category: PostCategory | None = Query(None),
    sort: Literal["new", "top"] = Query("new"),
    limit: int = Query(settings.posts_page_size, ge=1, le=settings.max_posts_page_size),
) -> PostListResponse:
    """List posts, optionally filtered by board and sorted by score."""
    summaries = post_service.list_posts(db, category=category, sort=sort, limit=limit)
    return PostListResponse(posts=[to_post_response(s) for s in summaries])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PostResponse:
    """Create a new post owned by the caller."""
    post = post_service.create_post(
        db,
        current_user,
        title=post_data.title,
        description=post_data.description,
        category=post_data.category,
        subject=post_data.subject,
    )
    return to_post_response(PostSummary(post=post, vote_score=0, comment_count=0))


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(post_id: str, db: SessionDep) -> PostDetailResponse:
    """Return a post with its threaded comments."""
    thread = post_service.get_post(db, post_id)
    base = to_post_response(thread.summary)
    return PostDetailResponse(
        **base.model_dump(),
        comments=[_to_comment_response(node) for node in thread.comments],
    )


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    comment_data: CommentCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CommentResponse:
    """Comment on a post or reply to one of its comments."""
    comment = post_service.create_comment(
        db,
        current_user,
        post_id=post_id,
        content=comment_data.content,
        parent_id=comment_data.parent_id,
    )
    return _to_comment_response(CommentNode(comment=comment, vote_score=0))
