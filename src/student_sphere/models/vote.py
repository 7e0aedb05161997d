"""Models capturing voting interactions on posts and comments."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, SmallInteger, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from student_sphere.db.session import Base
from student_sphere.models.post import new_id
from student_sphere.models.target import ContentTarget, target_from_columns


class Vote(Base):
    """Per-user vote on a post or a comment.

    Exactly one of ``post_id`` and ``comment_id`` is set. The unique
    constraints keep a single vote per (user, target) pair.
    """

    __tablename__ = "vote"
    __table_args__ = (
        CheckConstraint(
            "(post_id IS NULL) <> (comment_id IS NULL)",
            name="ck_vote_single_target",
        ),
        UniqueConstraint("user_id", "post_id", name="uq_vote_user_post"),
        UniqueConstraint("user_id", "comment_id", name="uq_vote_user_comment"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    # 1 = upvote; the schema layer only ever accepts 1.
    value: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )
    post_id: Mapped[str | None] = mapped_column(
        String(32),
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    comment_id: Mapped[str | None] = mapped_column(
        String(32),
        ForeignKey("comment.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    @property
    def target(self) -> ContentTarget:
        return target_from_columns(self.post_id, self.comment_id)
