"""Version 1 API endpoints."""

from .endpoints import (
    admin_router,
    auth_router,
    notifications_router,
    posts_router,
    reports_router,
    votes_router,
)

__all__ = [
    "admin_router",
    "auth_router",
    "notifications_router",
    "posts_router",
    "reports_router",
    "votes_router",
]
