"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from student_sphere.core.access import Identity, require_admin
from student_sphere.core.errors import AuthenticationError
from student_sphere.core.security import decode_identity_token
from student_sphere.db.session import get_db
from student_sphere.models import User
from student_sphere.services.moderation import ModerationService
from student_sphere.services.user_service import upsert_user_from_identity

# auto_error=False so a missing header surfaces as AuthenticationError (401)
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Identity:
    """Decode the bearer identity assertion.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Unauthorized")
    return decode_identity_token(credentials.credentials)


CurrentIdentityDep = Annotated[Identity, Depends(get_current_identity)]


def get_current_user(identity: CurrentIdentityDep, db: SessionDep) -> User:
    """Return the local user row for the authenticated identity."""
    return upsert_user_from_identity(db, identity)


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def get_admin_identity(identity: CurrentIdentityDep) -> Identity:
    """Resolve the admin capability once for the request."""
    return require_admin(identity)


AdminIdentityDep = Annotated[Identity, Depends(get_admin_identity)]


def get_moderation_service() -> ModerationService:
    """Return the moderation service bound to the configured allow-list."""
    return ModerationService()


ModerationServiceDep = Annotated[ModerationService, Depends(get_moderation_service)]
