"""Models for user-filed content reports."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from student_sphere.db.session import Base
from student_sphere.db.time import utcnow
from student_sphere.models.post import Comment, Post, new_id
from student_sphere.models.target import ContentTarget, target_from_columns
from student_sphere.models.user import User


class ReportStatus(str, enum.Enum):
    """Review progress of a report."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"


class ReportPriority(str, enum.Enum):
    """Triage priority assigned to a report."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Report(Base):
    """Complaint about a post or a comment awaiting admin review."""

    __tablename__ = "report"
    __table_args__ = (
        CheckConstraint(
            "(post_id IS NULL) <> (comment_id IS NULL)",
            name="ck_report_single_target",
        ),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=ReportStatus.PENDING.value,
        index=True,
    )
    priority: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=ReportPriority.LOW.value,
    )
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )
    post_id: Mapped[str | None] = mapped_column(
        String(32),
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=True,
    )
    comment_id: Mapped[str | None] = mapped_column(
        String(32),
        ForeignKey("comment.id", ondelete="CASCADE"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    user: Mapped[User] = relationship("User")
    post: Mapped[Post | None] = relationship("Post")
    comment: Mapped[Comment | None] = relationship("Comment")

    @property
    def target(self) -> ContentTarget:
        return target_from_columns(self.post_id, self.comment_id)
