"""SQLAlchemy declarative base for gatekeeper_identity models."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from gatekeeper.domain.shared.time import utc_now


class IdentityBase(DeclarativeBase):
    """Declarative base for identity models.

    The application includes IdentityBase.metadata when creating its schema.
    """


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps (utc_now)."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
