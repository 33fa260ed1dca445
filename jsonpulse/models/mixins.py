"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, func


class TimestampMixin:
    """Store-managed created_at/updated_at columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def touch(self) -> None:
        """Stamp updated_at from the application clock.

        The server default only has second resolution on some backends, so
        in-place edits set the value explicitly.
        """
        self.updated_at = datetime.now(UTC)
