"""Expense services."""

from __future__ import annotations

from datetime import date
from typing import List, Tuple

from sqlalchemy import func

from bizdash.domains.business.models import Expense
from bizdash.extensions import db

_UPDATABLE = ("description", "amount", "category", "expense_date")
_REQUIRED = ("description", "amount", "expense_date")


def create_expense(
    *,
    description: str,
    amount: float,
    category: str | None = None,
    expense_date: date | None = None,
) -> Expense:
    expense = Expense(
        description=description.strip(),
        amount=amount,
        category=category,
        expense_date=expense_date or date.today(),
    )
    db.session.add(expense)
    db.session.commit()
    return expense


def update_expense(expense_id: str, **fields) -> Expense | None:
    expense = db.session.get(Expense, expense_id)
    if not expense:
        return None
    for key in _UPDATABLE:
        if key not in fields:
            continue
        if fields[key] is None and key in _REQUIRED:
            continue
        setattr(expense, key, fields[key])
    db.session.commit()
    return expense


def delete_expense(expense_id: str) -> bool:
    expense = db.session.get(Expense, expense_id)
    if not expense:
        return False
    db.session.delete(expense)
    db.session.commit()
    return True


def get_expense(expense_id: str) -> Expense | None:
    return db.session.get(Expense, expense_id)


def list_expenses(page: int = 1, per_page: int = 50) -> Tuple[List[Expense], int]:
    query = Expense.query.order_by(Expense.expense_date.desc(), Expense.created_at.desc())
    total = query.count()
    items = query.offset((page - 1) * per_page).limit(per_page).all()
    return items, total


def total_expenses() -> float:
    return float(db.session.query(func.coalesce(func.sum(Expense.amount), 0)).scalar() or 0)
