"""SQLAlchemy ORM mixins – TimestampMixin."""
from __future__ import annotations

import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column


class TimestampMixin:
    """Adds a ``created_at`` column filled by the database on INSERT.

    Rows of the append-only tables are never updated, so there is no
    ``updated_at``. SQLite stores the value without an offset; readers
    treat it as UTC.
    """

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )


__all__ = ["TimestampMixin"]
