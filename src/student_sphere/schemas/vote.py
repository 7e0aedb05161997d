"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import Field

from .common import ApiModel


class VoteCreate(ApiModel):
    """Schema for casting a vote on a post or a comment.

    Only upvotes are accepted.
    """

    post_id: str | None = None
    comment_id: str | None = None
    value: Literal[1] = Field(1, description="1 for upvote")


class VoteResponse(ApiModel):
    """Caller's vote after the toggle and the target's new score."""

    vote: int | None
    vote_score: int
