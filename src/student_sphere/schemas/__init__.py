"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .admin import StatsResponse, UserListResponse, UserUpdateResponse
from .common import ApiModel, MessageResponse
from .notification import (
    MarkAllReadResponse,
    MarkReadRequest,
    NotificationListResponse,
    NotificationResponse,
)
from .post import (
    CommentCreate,
    CommentResponse,
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
)
from .report import (
    AdminReportResponse,
    ReportCreate,
    ReportListResponse,
    ReportResponse,
    ReportUpdate,
)
from .user import (
    AdminUserResponse,
    SessionResponse,
    UserCounts,
    UserResponse,
    UserStatusUpdate,
    UserSummary,
)
from .vote import VoteCreate, VoteResponse

__all__ = [
    "StatsResponse", "UserListResponse", "UserUpdateResponse",
    "ApiModel", "MessageResponse",
    "MarkAllReadResponse", "MarkReadRequest", "NotificationListResponse", "NotificationResponse",
    "CommentCreate", "CommentResponse", "PostCreate", "PostDetailResponse",
    "PostListResponse", "PostResponse",
    "AdminReportResponse", "ReportCreate", "ReportListResponse", "ReportResponse", "ReportUpdate",
    "AdminUserResponse", "SessionResponse", "UserCounts", "UserResponse",
    "UserStatusUpdate", "UserSummary",
    "VoteCreate", "VoteResponse",
]
