"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from .common import ApiModel


class UserSummary(ApiModel):
    """Public profile fields embedded in other resources."""

    id: str
    name: str | None = None
    email: str | None = None
    image: str | None = None


class UserResponse(UserSummary):
    """Full user record returned to administrators."""

    status: str
    created_at: datetime


class UserCounts(ApiModel):
    """Number of posts and reports owned by a user."""

    posts: int
    reports: int


class AdminUserResponse(UserResponse):
    """User row in the admin user list."""

    count: UserCounts = Field(..., alias="_count")


class UserStatusUpdate(ApiModel):
    """Body for changing a user's status.

    The value is validated by the moderation service so unknown statuses are
    reported as a 400 rather than a schema error.
    """

    status: str


class SessionResponse(ApiModel):
    """The caller's identity and capabilities for this session."""

    user: UserResponse
    is_admin: bool
