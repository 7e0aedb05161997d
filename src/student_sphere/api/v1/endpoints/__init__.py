"""API endpoint modules for version 1."""

from .admin import router as admin_router
from .auth import router as auth_router
from .notifications import router as notifications_router
from .posts import router as posts_router
from .reports import router as reports_router
from .votes import router as votes_router

__all__ = [
    "admin_router",
    "auth_router",
    "notifications_router",
    "posts_router",
    "reports_router",
    "votes_router",
]
