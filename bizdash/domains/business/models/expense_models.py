"""Expense model."""

from __future__ import annotations

from datetime import date

from sqlalchemy.orm import Mapped, mapped_column

from bizdash.core.utils.models import CreatedAtMixin, new_id
from bizdash.extensions import db


class Expense(db.Model, CreatedAtMixin):
    __tablename__ = "expenses"
    __table_args__ = (db.Index("ix_expenses_expense_date", "expense_date"),)

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=new_id)
    description: Mapped[str] = mapped_column(db.String(255), nullable=False)
    amount: Mapped[float] = mapped_column(db.Numeric(12, 2), nullable=False)
    category: Mapped[str | None] = mapped_column(db.String(128))
    expense_date: Mapped[date] = mapped_column(nullable=False, default=date.today)
