"""Per-user notification mailbox."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from student_sphere.db.session import Base
from student_sphere.db.time import utcnow
from student_sphere.models.post import new_id


class NotificationType(str, enum.Enum):
    """Kinds of events users are notified about."""

    POST_DELETED = "post_deleted"
    NEW_POST = "new_post"


class Notification(Base):
    """Message delivered to a single recipient.

    ``post_title`` is a snapshot copied when the notification is created and has
    no foreign key to the post, so it outlives the post.
    """

    __tablename__ = "notification"
    __table_args__ = (Index("ix_notification_user_created", "user_id", "created_at"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    post_title: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
