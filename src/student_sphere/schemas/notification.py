"""Notification Pydantic schemas."""

from datetime import datetime

from .common import ApiModel


class NotificationResponse(ApiModel):
    id: str
    type: str
    title: str
    message: str
    post_title: str | None
    read: bool
    created_at: datetime


class NotificationListResponse(ApiModel):
    """Mailbox contents as polled by the client."""

    notifications: list[NotificationResponse]
    unread_count: int


class MarkReadRequest(ApiModel):
    notification_id: str


class MarkAllReadResponse(ApiModel):
    message: str
    updated: int
