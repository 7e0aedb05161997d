"""Service-level helpers for posts, comments and reports."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from sqlalchemy import Select, desc, func, select
from sqlalchemy.orm import Session, joinedload

from student_sphere.core.errors import AuthorizationError, NotFoundError, ValidationError
from student_sphere.db.transaction import commit_or_raise
from student_sphere.models import (
    Comment,
    CommentTarget,
    Post,
    PostCategory,
    PostTarget,
    Report,
    ReportPriority,
    ReportStatus,
    User,
    Vote,
)
from student_sphere.models.target import ContentTarget, target_columns

logger = logging.getLogger(__name__)

PostSort = Literal["new", "top"]

__all__ = [
    "PostSummary",
    "CommentNode",
    "PostThread",
    "post_summaries",
    "create_post",
    "list_posts",
    "get_post",
    "create_comment",
    "create_report",
    "as_target",
]


@dataclass
class PostSummary:
    """A post with its derived counters."""

    post: Post
    vote_score: int
    comment_count: int


@dataclass
class CommentNode:
    """A comment, its score, and the replies nested under it."""

    comment: Comment
    vote_score: int
    replies: list[CommentNode] = field(default_factory=list)


@dataclass
class PostThread:
    """A post summary together with its comment tree."""

    summary: PostSummary
    comments: list[CommentNode]


def _ensure_can_contribute(user: User) -> None:
    if user.is_suspended:
        raise AuthorizationError("Suspended users cannot contribute content")


def _summary_statement() -> Select:
    score = (
        select(func.coalesce(func.sum(Vote.value), 0))
        .where(Vote.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )
    comments = (
        select(func.count(Comment.id))
        .where(Comment.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )
    return select(Post, score.label("vote_score"), comments.label("comment_count")).options(
        joinedload(Post.user)
    )


def post_summaries(db: Session, stmt: Select | None = None) -> list[PostSummary]:
    """Run a summary statement (default: all posts, newest first)."""
    if stmt is None:
        stmt = _summary_statement().order_by(Post.created_at.desc())
    return [
        PostSummary(post=post, vote_score=int(score or 0), comment_count=int(count or 0))
        for post, score, count in db.execute(stmt).unique().all()
    ]


def create_post(
    db: Session,
    user: User,
    *,
    title: str,
    description: str,
    category: PostCategory | str,
    subject: str | None = None,
) -> Post:
    """Persist a new post owned by ``user``."""
    _ensure_can_contribute(user)
    try:
        category_value = PostCategory(category).value
    except ValueError as err:
        raise ValidationError("Invalid category") from err

    post = Post(
        title=title,
        description=description,
        category=category_value,
        subject=subject or None,
        user_id=user.id,
    )
    db.add(post)
    commit_or_raise(db, "create post")
    logger.info("User %s created post %s", user.id, post.id)
    return post


def list_posts(
    db: Session,
    *,
    category: PostCategory | str | None = None,
    sort: PostSort = "new",
    limit: int = 50,
) -> list[PostSummary]:
    """Return post summaries filtered by category.

    ``top`` orders by score and then recency; ``new`` by recency only.
    """
    stmt = _summary_statement()
    if category is not None:
        try:
            stmt = stmt.where(Post.category == PostCategory(category).value)
        except ValueError as err:
            raise ValidationError("Invalid category") from err
    if sort == "top":
        stmt = stmt.order_by(desc("vote_score"), Post.created_at.desc())
    else:
        stmt = stmt.order_by(Post.created_at.desc())
    return post_summaries(db, stmt.limit(limit))


def get_post(db: Session, post_id: str) -> PostThread:
    """Return a post with its comments arranged as a tree.

    Raises:
        NotFoundError: If the post does not exist.
    """
    summaries = post_summaries(db, _summary_statement().where(Post.id == post_id))
    if not summaries:
        raise NotFoundError("Post not found")

    score = (
        select(func.coalesce(func.sum(Vote.value), 0))
        .where(Vote.comment_id == Comment.id)
        .correlate(Comment)
        .scalar_subquery()
    )
    rows = db.execute(
        select(Comment, score)
        .options(joinedload(Comment.user))
        .where(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc())
    ).unique().all()

    nodes = {comment.id: CommentNode(comment=comment, vote_score=int(s or 0)) for comment, s in rows}
    roots: list[CommentNode] = []
    for node in nodes.values():
        parent = nodes.get(node.comment.parent_id) if node.comment.parent_id else None
        if parent is None:
            roots.append(node)
        else:
            parent.replies.append(node)
    return PostThread(summary=summaries[0], comments=roots)


def create_comment(
    db: Session,
    user: User,
    *,
    post_id: str,
    content: str,
    parent_id: str | None = None,
) -> Comment:
    """Add a comment to a post, optionally replying to another comment.

    Raises:
        NotFoundError: If the post or the parent comment is missing.
        ValidationError: If the parent comment sits on a different post.
    """
    _ensure_can_contribute(user)
    if db.get(Post, post_id) is None:
        raise NotFoundError("Post not found")
    if parent_id is not None:
        parent = db.get(Comment, parent_id)
        if parent is None:
            raise NotFoundError("Parent comment not found")
        if parent.post_id != post_id:
            raise ValidationError("Parent comment belongs to a different post")

    comment = Comment(content=content, user_id=user.id, post_id=post_id, parent_id=parent_id)
    db.add(comment)
    commit_or_raise(db, "create comment")
    return comment


def create_report(
    db: Session,
    user: User,
    *,
    target: ContentTarget,
    reason: str,
    details: str | None = None,
) -> Report:
    """File a pending, low-priority report against a post or comment.

    Raises:
        NotFoundError: If the target does not exist.
        ValidationError: If the reason is blank.
    """
    _ensure_can_contribute(user)
    if not reason or not reason.strip():
        raise ValidationError("Reason is required")
    model = Post if isinstance(target, PostTarget) else Comment
    if db.get(model, target.id) is None:
        raise NotFoundError(f"{target.kind.capitalize()} not found")

    report = Report(
        reason=reason.strip(),
        details=(details or "").strip() or None,
        status=ReportStatus.PENDING.value,
        priority=ReportPriority.LOW.value,
        user_id=user.id,
        **target_columns(target),
    )
    db.add(report)
    commit_or_raise(db, "file report")
    logger.info(
        "User %s reported %s %s (%s)",
        user.id,
        target.kind,
        target.id,
        report.reason,
    )
    return report


def as_target(post_id: str | None, comment_id: str | None) -> ContentTarget:
    """Build a target from request fields carrying exactly one id."""
    if (post_id is None) == (comment_id is None):
        raise ValidationError("Provide exactly one of postId or commentId")
    if post_id is not None:
        return PostTarget(post_id)
    return CommentTarget(comment_id)
