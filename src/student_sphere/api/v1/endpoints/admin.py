"""Admin dashboard endpoints for the Student Sphere API.

The admin capability is resolved once per request by ``AdminIdentityDep``;
the moderation service re-checks it before acting.
"""

from __future__ import annotations

from fastapi import APIRouter, Response

from student_sphere.api.v1.dependencies import (
    AdminIdentityDep,
    ModerationServiceDep,
    SessionDep,
)
from student_sphere.schemas.admin import StatsResponse, UserListResponse, UserUpdateResponse
from student_sphere.schemas.common import MessageResponse
from student_sphere.schemas.post import PostListResponse
from student_sphere.schemas.report import (
    AdminReportResponse,
    ReportListResponse,
    ReportResponse,
    ReportUpdate,
)
from student_sphere.schemas.user import (
    AdminUserResponse,
    UserCounts,
    UserResponse,
    UserStatusUpdate,
)

from .posts import to_post_response

router = APIRouter(prefix="/admin", tags=["admin"])

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _no_cache(response: Response) -> None:
    response.headers.update(NO_CACHE_HEADERS)


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    admin: AdminIdentityDep,
    db: SessionDep,
    moderation: ModerationServiceDep,
    response: Response,
) -> StatsResponse:
    """Headline counts for the dashboard."""
    _no_cache(response)
    stats = moderation.stats(db, admin)
    return StatsResponse(
        total_users=stats.total_users,
        total_posts=stats.total_posts,
        total_comments=stats.total_comments,
        pending_reports=stats.pending_reports,
    )


@router.get("/posts", response_model=PostListResponse)
async def list_all_posts(
    admin: AdminIdentityDep,
    db: SessionDep,
    moderation: ModerationServiceDep,
    response: Response,
) -> PostListResponse:
    """Every post, newest first, with scores and comment counts."""
    _no_cache(response)
    summaries = moderation.list_posts(db, admin)
    return PostListResponse(posts=[to_post_response(s) for s in summaries])


@router.delete("/posts/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    admin: AdminIdentityDep,
    db: SessionDep,
    moderation: ModerationServiceDep,
) -> MessageResponse:
    """Delete a post and notify its author."""
    moderation.delete_post(db, post_id, admin)
    return MessageResponse(message="Post deleted successfully")


@router.get("/reports", response_model=ReportListResponse)
async def list_reports(
    admin: AdminIdentityDep,
    db: SessionDep,
    moderation: ModerationServiceDep,
    response: Response,
) -> ReportListResponse:
    """The report queue, newest first."""
    _no_cache(response)
    reports = moderation.list_reports(db, admin)
    return ReportListResponse(reports=[AdminReportResponse.model_validate(r) for r in reports])


@router.patch("/reports/{report_id}", response_model=ReportResponse)
async def update_report(
    report_id: str,
    body: ReportUpdate,
    admin: AdminIdentityDep,
    db: SessionDep,
    moderation: ModerationServiceDep,
) -> ReportResponse:
    """Mark a report reviewed or resolved, optionally changing its priority."""
    report = moderation.update_report_status(
        db,
        report_id,
        body.status,
        admin,
        priority=body.priority,
    )
    return ReportResponse.model_validate(report)


@router.get("/users", response_model=UserListResponse)
async def list_users(
    admin: AdminIdentityDep,
    db: SessionDep,
    moderation: ModerationServiceDep,
    response: Response,
) -> UserListResponse:
    """Every user with post and report counts."""
    _no_cache(response)
    overviews = moderation.list_users(db, admin)
    return UserListResponse(
        users=[
            AdminUserResponse(
                **UserResponse.model_validate(o.user).model_dump(),
                count=UserCounts(posts=o.post_count, reports=o.report_count),
            )
            for o in overviews
        ]
    )


@router.patch("/users/{user_id}", response_model=UserUpdateResponse)
async def update_user_status(
    user_id: str,
    body: UserStatusUpdate,
    admin: AdminIdentityDep,
    db: SessionDep,
    moderation: ModerationServiceDep,
) -> UserUpdateResponse:
    """Set a user's status to active, warned or suspended."""
    user = moderation.change_user_status(db, user_id, body.status, admin)
    return UserUpdateResponse(user=UserResponse.model_validate(user))
