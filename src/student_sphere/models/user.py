"""SQLAlchemy models for forum members."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from student_sphere.db.session import Base
from student_sphere.db.time import utcnow


class UserStatus(str, enum.Enum):
    """Account standing set by administrators."""

    ACTIVE = "active"
    WARNED = "warned"
    SUSPENDED = "suspended"


class User(Base):
    """Forum member keyed by the identity provider's subject."""

    __tablename__ = "user"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), unique=True, nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=UserStatus.ACTIVE.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    @property
    def is_suspended(self) -> bool:
        """Return True when the account may not create new content."""
        return self.status == UserStatus.SUSPENDED.value
