"""Tagged target variant shared by votes and reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class PostTarget:
    """Reference to a post."""

    id: str
    kind: Literal["post"] = "post"


@dataclass(frozen=True)
class CommentTarget:
    """Reference to a comment."""

    id: str
    kind: Literal["comment"] = "comment"


ContentTarget = Union[PostTarget, CommentTarget]


def target_columns(target: ContentTarget) -> dict[str, str | None]:
    """Map a target onto the (post_id, comment_id) column pair."""
    if isinstance(target, PostTarget):
        return {"post_id": target.id, "comment_id": None}
    return {"post_id": None, "comment_id": target.id}


def target_from_columns(post_id: str | None, comment_id: str | None) -> ContentTarget:
    """Rebuild the variant from a stored row."""
    if post_id is not None:
        return PostTarget(post_id)
    if comment_id is None:
        raise ValueError("Row has neither post_id nor comment_id")
    return CommentTarget(comment_id)
