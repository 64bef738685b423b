"""Column helpers shared by all models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import Mapped, mapped_column


def new_id() -> str:
    """Opaque string identifier (UUID4 text)."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # Naive UTC, matching what sqlite hands back.
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CreatedAtMixin:
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
