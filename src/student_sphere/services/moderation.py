"""Moderation services for Student Sphere.

Every operation here is privileged: the acting identity is checked against the
admin allow-list before the store is read or written.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from student_sphere.core.access import Identity, require_admin
from student_sphere.core.errors import NotFoundError, StoreError, ValidationError
from student_sphere.db.transaction import commit_or_raise
from student_sphere.models import (
    Comment,
    NotificationType,
    Post,
    Report,
    ReportPriority,
    ReportStatus,
    User,
    UserStatus,
    Vote,
)
from student_sphere.services.notifications import create_notification
from student_sphere.services.posts import PostSummary, post_summaries

logger = logging.getLogger(__name__)

POST_DELETED_TITLE = "Post Deleted"
POST_DELETED_MESSAGE = (
    "Your post has been deleted due to violating the privacy policy of the system."
)


@dataclass(frozen=True)
class DashboardStats:
    """Headline counts shown on the admin dashboard."""

    total_users: int
    total_posts: int
    total_comments: int
    pending_reports: int


@dataclass
class UserOverview:
    """A user row with the number of posts and reports they filed."""

    user: User
    post_count: int
    report_count: int


class ModerationService:
    """Service handling privileged moderation actions.

    Args:
        admin_emails: Allow-list to check against. Defaults to the configured
            ``ADMIN_EMAILS`` setting.
    """

    def __init__(self, admin_emails: Iterable[str] | None = None) -> None:
        self.admin_emails = frozenset(admin_emails) if admin_emails is not None else None

    def _authorize(self, identity: Identity | None) -> Identity:
        return require_admin(identity, self.admin_emails)

    def delete_post(self, db: Session, post_id: str, identity: Identity | None) -> None:
        """Delete a post, notifying its author first.

        The notification is written with the post title captured before any
        row is removed, then reports, votes and comments on the post are
        deleted, then the post itself, all in one transaction. If another
        request removed the post in the meantime the whole transaction is
        rolled back.

        Raises:
            AuthorizationError: If ``identity`` is not an admin.
            NotFoundError: If the post does not exist.
            StoreError: If the store fails; nothing is applied.
        """
        admin = self._authorize(identity)

        post = db.get(Post, post_id)
        if post is None:
            raise NotFoundError("Post not found")
        owner_id = post.user_id
        title_snapshot = post.title

        try:
            create_notification(
                db,
                owner_id,
                NotificationType.POST_DELETED,
                POST_DELETED_TITLE,
                POST_DELETED_MESSAGE,
                post_title=title_snapshot,
            )

            comment_ids = select(Comment.id).where(Comment.post_id == post_id)
            db.execute(
                delete(Report)
                .where(or_(Report.post_id == post_id, Report.comment_id.in_(comment_ids)))
                .execution_options(synchronize_session=False)
            )
            db.execute(
                delete(Vote)
                .where(or_(Vote.post_id == post_id, Vote.comment_id.in_(comment_ids)))
                .execution_options(synchronize_session=False)
            )
            db.execute(
                delete(Comment)
                .where(Comment.post_id == post_id)
                .execution_options(synchronize_session=False)
            )
            result = db.execute(
                delete(Post)
                .where(Post.id == post_id)
                .execution_options(synchronize_session=False)
            )
        except SQLAlchemyError as err:
            db.rollback()
            logger.error("Failed to delete post %s", post_id, exc_info=True)
            raise StoreError("Failed to delete post") from err

        if result.rowcount == 0:
            db.rollback()
            raise NotFoundError("Post not found")

        db.expunge(post)
        commit_or_raise(db, "delete post")
        logger.info("Admin %s deleted post %s owned by %s", admin.email, post_id, owner_id)

    def change_user_status(
        self,
        db: Session,
        user_id: str,
        new_status: str,
        identity: Identity | None,
    ) -> User:
        """Set a user's account status.

        Content already published by the user is left untouched.

        Raises:
            AuthorizationError: If ``identity`` is not an admin.
            ValidationError: If ``new_status`` is not a known status.
            NotFoundError: If the user does not exist.
        """
        admin = self._authorize(identity)
        try:
            status_value = UserStatus(new_status).value
        except ValueError as err:
            raise ValidationError("Invalid status") from err

        user = db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")

        if user.status != status_value:
            user.status = status_value
            commit_or_raise(db, "update user")
            logger.info("Admin %s set user %s status to %s", admin.email, user_id, status_value)
        return user

    def update_report_status(
        self,
        db: Session,
        report_id: str,
        new_status: str,
        identity: Identity | None,
        priority: str | None = None,
    ) -> Report:
        """Move a report through review and optionally re-prioritise it.

        Raises:
            AuthorizationError: If ``identity`` is not an admin.
            ValidationError: If the status or priority is unknown.
            NotFoundError: If the report does not exist.
        """
        admin = self._authorize(identity)
        try:
            status_value = ReportStatus(new_status).value
            priority_value = ReportPriority(priority).value if priority is not None else None
        except ValueError as err:
            raise ValidationError("Invalid report status or priority") from err

        report = db.get(Report, report_id)
        if report is None:
            raise NotFoundError("Report not found")

        changed = report.status != status_value or (
            priority_value is not None and report.priority != priority_value
        )
        if changed:
            report.status = status_value
            if priority_value is not None:
                report.priority = priority_value
            commit_or_raise(db, "update report")
            logger.info("Admin %s set report %s to %s", admin.email, report_id, status_value)
        return report

    def stats(self, db: Session, identity: Identity | None) -> DashboardStats:
        """Return dashboard counts read in a single statement."""
        self._authorize(identity)
        row = db.execute(
            select(
                select(func.count()).select_from(User).scalar_subquery(),
                select(func.count()).select_from(Post).scalar_subquery(),
                select(func.count()).select_from(Comment).scalar_subquery(),
                select(func.count())
                .select_from(Report)
                .where(Report.status == ReportStatus.PENDING.value)
                .scalar_subquery(),
            )
        ).one()
        return DashboardStats(
            total_users=int(row[0] or 0),
            total_posts=int(row[1] or 0),
            total_comments=int(row[2] or 0),
            pending_reports=int(row[3] or 0),
        )

    def list_posts(self, db: Session, identity: Identity | None) -> list[PostSummary]:
        """Return every post, newest first, with score and comment count."""
        self._authorize(identity)
        return post_summaries(db)

    def list_reports(self, db: Session, identity: Identity | None) -> list[Report]:
        """Return every report, newest first, with reporter and target loaded."""
        self._authorize(identity)
        return list(
            db.scalars(
                select(Report)
                .options(
                    joinedload(Report.user),
                    joinedload(Report.post),
                    joinedload(Report.comment),
                )
                .order_by(Report.created_at.desc())
            ).unique()
        )

    def list_users(self, db: Session, identity: Identity | None) -> list[UserOverview]:
        """Return every user, newest first, with post and report counts."""
        self._authorize(identity)
        posts = (
            select(func.count(Post.id))
            .where(Post.user_id == User.id)
            .correlate(User)
            .scalar_subquery()
        )
        reports = (
            select(func.count(Report.id))
            .where(Report.user_id == User.id)
            .correlate(User)
            .scalar_subquery()
        )
        rows = db.execute(select(User, posts, reports).order_by(User.created_at.desc())).all()
        return [
            UserOverview(user=user, post_count=int(p or 0), report_count=int(r or 0))
            for user, p, r in rows
        ]
