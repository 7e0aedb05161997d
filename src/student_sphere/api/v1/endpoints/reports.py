"""Report submission endpoints for the Student Sphere API."""

from fastapi import APIRouter, status

from student_sphere.api.v1.dependencies import CurrentUserDep, SessionDep
from student_sphere.schemas.report import ReportCreate, ReportResponse
from student_sphere.services.posts import as_target, create_report

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def submit_report(
    report_data: ReportCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> ReportResponse:
    """Report a post or comment for admin review."""
    report = create_report(
        db,
        current_user,
        target=as_target(report_data.post_id, report_data.comment_id),
        reason=report_data.reason,
        details=report_data.details,
    )
    return ReportResponse.model_validate(report)
