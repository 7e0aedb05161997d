"""SQLAlchemy models for the Student Sphere application."""

from .notification import Notification, NotificationType
from .post import Comment, Post, PostCategory
from .report import Report, ReportPriority, ReportStatus
from .target import CommentTarget, ContentTarget, PostTarget
from .user import User, UserStatus
from .vote import Vote

__all__ = [
    "Notification", "NotificationType",
    "Comment", "Post", "PostCategory",
    "Report", "ReportPriority", "ReportStatus",
    "CommentTarget", "ContentTarget", "PostTarget",
    "User", "UserStatus",
    "Vote",
]
