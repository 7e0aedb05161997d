"""Report-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from .common import ApiModel
from .user import UserSummary


class ReportCreate(ApiModel):
    """Schema for reporting a post or a comment."""

    post_id: str | None = None
    comment_id: str | None = None
    reason: str = Field(..., min_length=1, max_length=100)
    details: str | None = Field(None, max_length=500)


class ReportPostSummary(ApiModel):
    id: str
    title: str


class ReportCommentSummary(ApiModel):
    id: str
    content: str


class ReportResponse(ApiModel):
    """Report as shown to its author and to administrators."""

    id: str
    reason: str
    details: str | None
    status: str
    priority: str
    user_id: str
    post_id: str | None
    comment_id: str | None
    created_at: datetime


class AdminReportResponse(ReportResponse):
    """Report with reporter and target summaries for the admin queue."""

    user: UserSummary
    post: ReportPostSummary | None = None
    comment: ReportCommentSummary | None = None


class ReportListResponse(ApiModel):
    reports: list[AdminReportResponse]


class ReportUpdate(ApiModel):
    """Body for moving a report through review."""

    status: str
    priority: str | None = None
