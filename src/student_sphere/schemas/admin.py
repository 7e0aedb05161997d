"""Admin dashboard Pydantic schemas."""

from .common import ApiModel
from .user import AdminUserResponse, UserResponse


class StatsResponse(ApiModel):
    """Headline dashboard counts."""

    total_users: int
    total_posts: int
    total_comments: int
    pending_reports: int


class UserListResponse(ApiModel):
    users: list[AdminUserResponse]


class UserUpdateResponse(ApiModel):
    user: UserResponse
