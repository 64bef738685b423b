"""Sales order and order line models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizdash.core.utils.models import CreatedAtMixin, new_id, utcnow
from bizdash.extensions import db

ORDER_STATUS_PENDING = "pending"
ORDER_STATUS_COMPLETED = "completed"
ORDER_STATUS_CANCELLED = "cancelled"
ORDER_STATUSES = (ORDER_STATUS_PENDING, ORDER_STATUS_COMPLETED, ORDER_STATUS_CANCELLED)


class Order(db.Model, CreatedAtMixin):
    __tablename__ = "orders"
    __table_args__ = (db.Index("ix_orders_order_date", "order_date"),)

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=new_id)
    customer_id: Mapped[str | None] = mapped_column(
        db.ForeignKey("customers.id", ondelete="SET NULL"), nullable=True, index=True
    )
    order_date: Mapped[datetime] = mapped_column(nullable=False, default=utcnow)
    status: Mapped[str] = mapped_column(db.String(16), nullable=False, default=ORDER_STATUS_PENDING)
    total_amount: Mapped[float] = mapped_column(db.Numeric(12, 2), nullable=False, default=0)

    customer = relationship("Customer", back_populates="orders")
    items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem", back_populates="order", cascade="all, delete-orphan"
    )


class OrderItem(db.Model):
    __tablename__ = "order_items"

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=new_id)
    order_id: Mapped[str] = mapped_column(
        db.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: Mapped[str | None] = mapped_column(
        db.ForeignKey("products.id", ondelete="SET NULL"), nullable=True, index=True
    )
    quantity: Mapped[int] = mapped_column(nullable=False)
    unit_price: Mapped[float] = mapped_column(db.Numeric(12, 2), nullable=False)
    total_price: Mapped[float] = mapped_column(db.Numeric(12, 2), nullable=False)

    order: Mapped[Order] = relationship("Order", back_populates="items")
    product = relationship("Product")
