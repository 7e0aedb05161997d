"""Administrator access policy.

Admin status is decided purely from the identity's email against a configured
allow-list. Nothing here touches the database.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from student_sphere.core.errors import AuthorizationError
from student_sphere.core.settings import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Authenticated identity asserted by the external OAuth provider."""

    id: str
    email: str | None = None
    name: str | None = None
    image: str | None = None


def is_admin(identity: Identity | None, admin_emails: Iterable[str] | None = None) -> bool:
    """Return True if the identity's email is on the admin allow-list.

    Matching is exact and case-sensitive. When ``admin_emails`` is omitted the
    configured ``ADMIN_EMAILS`` setting is used.
    """
    if identity is None or not identity.email:
        return False
    if admin_emails is None:
        admin_emails = settings.admin_email_set
    return identity.email in frozenset(admin_emails)


def require_admin(identity: Identity | None, admin_emails: Iterable[str] | None = None) -> Identity:
    """Return the identity if it is an admin, else raise AuthorizationError."""
    if identity is None or not is_admin(identity, admin_emails):
        logger.warning(
            "Rejected privileged operation for %s",
            identity.email if identity is not None else "<anonymous>",
        )
        raise AuthorizationError("Forbidden")
    return identity
