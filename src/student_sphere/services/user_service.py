"""Helpers for mirroring provider identities into local user rows."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from student_sphere.core.access import Identity
from student_sphere.core.errors import ValidationError
from student_sphere.db.transaction import commit_or_raise
from student_sphere.models import User

logger = logging.getLogger(__name__)

__all__ = ["get_user", "upsert_user_from_identity"]


def get_user(db: Session, user_id: str) -> User | None:
    """Return a single user by primary key."""
    return db.get(User, user_id)


def _ensure_email_free(db: Session, email: str | None, user_id: str) -> None:
    if not email:
        return
    owner = db.scalars(select(User.id).where(User.email == email)).first()
    if owner is not None and owner != user_id:
        logger.warning("Identity %s claims email %s owned by user %s", user_id, email, owner)
        raise ValidationError(f"Email {email} is already linked to another account")


def upsert_user_from_identity(db: Session, identity: Identity) -> User:
    """Return the user row for ``identity``, creating or refreshing it.

    Profile fields follow the provider on every sign-in; ``status`` is never
    touched here.

    Raises:
        ValidationError: If the identity's email belongs to another user.
    """
    user = db.get(User, identity.id)
    if user is None:
        _ensure_email_free(db, identity.email, identity.id)
        user = User(
            id=identity.id,
            email=identity.email,
            name=identity.name,
            image=identity.image,
        )
        db.add(user)
        commit_or_raise(db, "create user")
        logger.info("Created user %s on first sign-in", identity.id)
        return user

    if identity.email is not None and identity.email != user.email:
        _ensure_email_free(db, identity.email, user.id)

    changed = False
    for field in ("email", "name", "image"):
        value = getattr(identity, field)
        if value is not None and getattr(user, field) != value:
            setattr(user, field, value)
            changed = True
    if changed:
        commit_or_raise(db, "update user profile")
    return user
