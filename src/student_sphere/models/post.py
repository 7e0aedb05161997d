"""SQLAlchemy models for posts and threaded comments."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from student_sphere.db.session import Base
from student_sphere.db.time import utcnow
from student_sphere.models.user import User


def new_id() -> str:
    """Return a fresh opaque primary key."""
    return uuid.uuid4().hex


class PostCategory(str, enum.Enum):
    """Board a post is filed under."""

    ACADEMIC = "ACADEMIC"
    NON_ACADEMIC = "NON_ACADEMIC"


class Post(Base):
    """Top-level discussion started by a user.

    Scores and comment counts are derived at query time from the vote and
    comment tables, never stored on the row.
    """

    __tablename__ = "post"
    __table_args__ = (
        Index("ix_post_created_at", "created_at"),
        Index("ix_post_category", "category"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(16), nullable=False)
    subject: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    user: Mapped[User] = relationship("User")


class Comment(Base):
    """Reply to a post, optionally nested under another comment."""

    __tablename__ = "comment"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )
    post_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Thread nesting; top-level comments have parent_id = NULL.
    parent_id: Mapped[str | None] = mapped_column(
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
