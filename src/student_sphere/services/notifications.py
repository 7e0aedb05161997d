"""Notification mailbox operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from student_sphere.core.errors import ForbiddenError, NotFoundError
from student_sphere.db.transaction import commit_or_raise
from student_sphere.models import Notification, NotificationType, User

logger = logging.getLogger(__name__)

__all__ = [
    "Mailbox",
    "create_notification",
    "list_for_user",
    "mark_read",
    "mark_all_read",
]


@dataclass
class Mailbox:
    """Notifications for one user, newest first, plus the unread tally."""

    notifications: list[Notification]
    unread_count: int


def create_notification(
    db: Session,
    recipient_user_id: str,
    type: NotificationType | str,
    title: str,
    message: str,
    post_title: str | None = None,
) -> Notification:
    """Stage a notification for ``recipient_user_id`` in the current transaction.

    Snapshot fields are plain values copied onto the row, so the notification
    does not depend on the content that triggered it. The caller commits.

    Raises:
        NotFoundError: If the recipient does not exist.
    """
    if db.get(User, recipient_user_id) is None:
        raise NotFoundError("Recipient not found")

    notification = Notification(
        type=NotificationType(type).value,
        title=title,
        message=message,
        post_title=post_title,
        user_id=recipient_user_id,
        read=False,
    )
    db.add(notification)
    db.flush()
    return notification


def list_for_user(db: Session, user_id: str) -> Mailbox:
    """Return every notification addressed to ``user_id``."""
    notifications = list(
        db.scalars(
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
        )
    )
    unread = sum(1 for n in notifications if not n.read)
    return Mailbox(notifications=notifications, unread_count=unread)


def mark_read(db: Session, notification_id: str, user_id: str) -> Notification:
    """Mark one notification read on behalf of its recipient.

    Raises:
        NotFoundError: If the notification does not exist.
        ForbiddenError: If it belongs to another user.
    """
    notification = db.get(Notification, notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    if notification.user_id != user_id:
        raise ForbiddenError("Cannot modify another user's notification")

    if not notification.read:
        notification.read = True
        commit_or_raise(db, "mark notification read")
    return notification


def mark_all_read(db: Session, user_id: str) -> int:
    """Mark every unread notification of ``user_id`` read in one statement."""
    result = db.execute(
        update(Notification)
        .where(Notification.user_id == user_id, Notification.read.is_(False))
        .values(read=True)
        .execution_options(synchronize_session="fetch")
    )
    commit_or_raise(db, "mark notifications read")
    logger.debug("Marked %d notifications read for %s", result.rowcount, user_id)
    return int(result.rowcount or 0)
