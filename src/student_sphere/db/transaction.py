"""Commit helpers that translate driver failures into StoreError."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from student_sphere.core.errors import StoreError

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, action: str) -> None:
    """Commit the session, rolling back and raising StoreError on failure.

    Args:
        db: Session holding the pending unit of work.
        action: Short description used in logs and the error message.
    """
    try:
        db.commit()
    except SQLAlchemyError as err:
        db.rollback()
        logger.error("Failed to %s", action, exc_info=True)
        raise StoreError(f"Failed to {action}") from err
