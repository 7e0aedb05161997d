"""Notification mailbox endpoints for the Student Sphere API."""

from fastapi import APIRouter

from student_sphere.api.v1.dependencies import CurrentUserDep, SessionDep
from student_sphere.schemas.notification import (
    MarkAllReadResponse,
    MarkReadRequest,
    NotificationListResponse,
    NotificationResponse,
)
from student_sphere.services import notifications as mailbox

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(current_user: CurrentUserDep, db: SessionDep) -> NotificationListResponse:
    """Return the caller's notifications, newest first, with the unread count."""
    box = mailbox.list_for_user(db, current_user.id)
    return NotificationListResponse(
        notifications=[NotificationResponse.model_validate(n) for n in box.notifications],
        unread_count=box.unread_count,
    )


@router.patch("", response_model=NotificationResponse)
async def mark_notification_read(
    body: MarkReadRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> NotificationResponse:
    """Mark one of the caller's notifications read."""
    notification = mailbox.mark_read(db, body.notification_id, current_user.id)
    return NotificationResponse.model_validate(notification)


@router.post("", response_model=MarkAllReadResponse)
async def mark_all_notifications_read(current_user: CurrentUserDep, db: SessionDep) -> MarkAllReadResponse:
    """Mark every notification of the caller read."""
    updated = mailbox.mark_all_read(db, current_user.id)
    return MarkAllReadResponse(message="All notifications marked as read", updated=updated)
