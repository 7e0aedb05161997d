"""Session endpoints for the Student Sphere API."""

from __future__ import annotations

from fastapi import APIRouter

from student_sphere.api.v1.dependencies import CurrentIdentityDep, CurrentUserDep
from student_sphere.core.access import is_admin
from student_sphere.schemas.user import SessionResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.get("/session", response_model=SessionResponse)
async def get_session(identity: CurrentIdentityDep, current_user: CurrentUserDep) -> SessionResponse:
    """Return the signed-in user and whether they hold admin rights.

    Clients read ``isAdmin`` from here once per session instead of probing
    admin endpoints.
    """
    return SessionResponse(
        user=UserResponse.model_validate(current_user),
        is_admin=is_admin(identity),
    )
