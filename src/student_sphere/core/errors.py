"""Domain error taxonomy shared by services and the HTTP boundary."""

from __future__ import annotations

from fastapi import status


class StudentSphereError(RuntimeError):
    """Base exception for failures surfaced to API callers.

    Each subclass carries the HTTP status the boundary maps it to.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Request failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class AuthenticationError(StudentSphereError):
    """Raised when no identity accompanies a request."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"


class AuthorizationError(StudentSphereError):
    """Raised when an identity lacks the privilege for an operation."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class ForbiddenError(StudentSphereError):
    """Raised when acting on another principal's private resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class ValidationError(StudentSphereError):
    """Raised on malformed input such as an unknown status value."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class NotFoundError(StudentSphereError):
    """Raised when the target entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class StoreError(StudentSphereError):
    """Raised when the relational store fails; the operation did not complete."""

    default_detail = "Storage operation failed"
