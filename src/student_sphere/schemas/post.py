"""Post and comment Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from .common import ApiModel
from .user import UserSummary


class PostCreate(ApiModel):
    """Schema for creating a new post."""

    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(..., min_length=1, max_length=10000)
    category: Literal["ACADEMIC", "NON_ACADEMIC"]
    subject: str | None = Field(None, max_length=200)


class PostResponse(ApiModel):
    """Post with derived counters."""

    id: str
    title: str
    description: str
    category: str
    subject: str | None
    user_id: str
    created_at: datetime
    user: UserSummary
    vote_score: int = 0
    comment_count: int = 0


class PostListResponse(ApiModel):
    """Envelope for post listings."""

    posts: list[PostResponse]


class CommentCreate(ApiModel):
    """Schema for adding a comment to a post."""

    content: str = Field(..., min_length=1, max_length=5000)
    parent_id: str | None = None


class CommentResponse(ApiModel):
    """Comment node, including nested replies."""

    id: str
    content: str
    post_id: str
    parent_id: str | None
    user_id: str
    created_at: datetime
    user: UserSummary
    vote_score: int = 0
    replies: list[CommentResponse] = Field(default_factory=list)


class PostDetailResponse(PostResponse):
    """Post together with its comment thread."""

    comments: list[CommentResponse]
