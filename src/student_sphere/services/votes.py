"""Vote toggling for posts and comments."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from student_sphere.core.errors import AuthorizationError, NotFoundError
from student_sphere.db.transaction import commit_or_raise
from student_sphere.models import Comment, Post, PostTarget, User, Vote
from student_sphere.models.target import ContentTarget, target_columns

__all__ = ["VoteResult", "cast_vote", "vote_score", "current_vote"]


@dataclass(frozen=True)
class VoteResult:
    """Outcome of a vote: the caller's stored value (None if removed) and the new score."""

    vote: int | None
    vote_score: int


def _target_filter(target: ContentTarget):
    if isinstance(target, PostTarget):
        return Vote.post_id == target.id
    return Vote.comment_id == target.id


def _ensure_target_exists(db: Session, target: ContentTarget) -> None:
    model = Post if isinstance(target, PostTarget) else Comment
    if db.get(model, target.id) is None:
        raise NotFoundError(f"{target.kind.capitalize()} not found")


def vote_score(db: Session, target: ContentTarget) -> int:
    """Return the sum of all stored vote values for ``target``."""
    total = db.scalar(select(func.coalesce(func.sum(Vote.value), 0)).where(_target_filter(target)))
    return int(total or 0)


def current_vote(db: Session, voter_id: str, target: ContentTarget) -> Vote | None:
    """Return the voter's stored vote on ``target``, if any."""
    return db.scalars(
        select(Vote)
        .where(Vote.user_id == voter_id, _target_filter(target))
        .with_for_update()
    ).first()


def _apply(db: Session, voter_id: str, target: ContentTarget, value: int) -> int | None:
    existing = current_vote(db, voter_id, target)
    if existing is not None:
        if existing.value == value:
            db.delete(existing)
            db.flush()
            return None
        existing.value = value
        db.flush()
        return value

    with db.begin_nested():
        db.add(Vote(value=value, user_id=voter_id, **target_columns(target)))
    return value


def cast_vote(db: Session, voter: User, target: ContentTarget, value: int) -> VoteResult:
    """Toggle or replace ``voter``'s vote on ``target``.

    Casting the stored value again removes the vote; any other value replaces
    it. The existing row is locked while deciding, and a concurrent first
    insert on the same key is resolved by re-running the decision once.

    Raises:
        NotFoundError: If the target does not exist.
        AuthorizationError: If the voter is suspended.
    """
    if voter.is_suspended:
        raise AuthorizationError("Suspended users cannot vote")
    _ensure_target_exists(db, target)

    try:
        stored = _apply(db, voter.id, target, value)
    except IntegrityError:
        stored = _apply(db, voter.id, target, value)

    commit_or_raise(db, "record vote")
    return VoteResult(vote=stored, vote_score=vote_score(db, target))
