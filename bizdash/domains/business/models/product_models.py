"""Product (inventory) model."""

from __future__ import annotations

from sqlalchemy.orm import Mapped, mapped_column

from bizdash.core.utils.models import CreatedAtMixin, new_id
from bizdash.extensions import db


class Product(db.Model, CreatedAtMixin):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(db.String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(db.Text)
    price: Mapped[float] = mapped_column(db.Numeric(12, 2), nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(nullable=False, default=0)
    category: Mapped[str | None] = mapped_column(db.String(128))
    sku: Mapped[str | None] = mapped_column(db.String(64))
