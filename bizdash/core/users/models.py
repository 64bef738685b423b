"""Dashboard user model."""

from __future__ import annotations

from sqlalchemy.orm import Mapped, mapped_column

from bizdash.core.utils.models import CreatedAtMixin, new_id
from bizdash.extensions import db


class User(db.Model, CreatedAtMixin):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=new_id)
    # Not unique: legacy tables may hold duplicates, which login rejects.
    username: Mapped[str] = mapped_column(db.String(150), nullable=False, index=True)
    password: Mapped[str] = mapped_column(db.String(255), nullable=False)
    full_name: Mapped[str | None] = mapped_column(db.String(255))
    email: Mapped[str | None] = mapped_column(db.String(255))
    role: Mapped[str] = mapped_column(db.String(32), nullable=False, default="admin")
