"""Customer model."""

from __future__ import annotations

from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizdash.core.utils.models import CreatedAtMixin, new_id
from bizdash.extensions import db


class Customer(db.Model, CreatedAtMixin):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(db.String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(db.String(255))
    phone: Mapped[str | None] = mapped_column(db.String(64))
    address: Mapped[str | None] = mapped_column(db.Text)

    # Deleting a customer nulls orders.customer_id; order history stays.
    orders = relationship("Order", back_populates="customer")
