"""Read-only aggregates for the analytics screen.

Status and category breakdowns are a single GROUP BY each. Month buckets are
computed in Python because month truncation differs between sqlite and
Postgres.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Dict, List

from sqlalchemy import func

from bizdash.domains.business.models import Expense, Order, Product
from bizdash.extensions import db

UNCATEGORIZED = "Uncategorized"


def month_key(value: date | datetime) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def month_label(key: str) -> str:
    return calendar.month_abbr[int(key[5:7])]


def _round(value) -> float:
    return round(float(value or 0), 2)


def sales_by_status() -> List[dict]:
    rows = (
        db.session.query(Order.status, func.sum(Order.total_amount))
        .group_by(Order.status)
        .order_by(Order.status.asc())
        .all()
    )
    return [{"status": status, "amount": _round(amount)} for status, amount in rows]


def products_by_category() -> List[dict]:
    category = func.coalesce(func.nullif(func.trim(Product.category), ""), UNCATEGORIZED).label("category_name")
    rows = (
        db.session.query(category, func.count(Product.id))
        .group_by(category)
        .order_by(category.asc())
        .all()
    )
    return [{"category": name, "count": int(count)} for name, count in rows]


def monthly_expenses() -> List[dict]:
    buckets: Dict[str, float] = {}
    rows = db.session.query(Expense.expense_date, Expense.amount).order_by(Expense.expense_date.asc()).all()
    for expense_date, amount in rows:
        key = month_key(expense_date)
        buckets[key] = buckets.get(key, 0.0) + float(amount or 0)
    return [
        {"month": key, "label": month_label(key), "amount": round(total, 2)}
        for key, total in buckets.items()
    ]


def key_metrics() -> dict:
    revenue, order_count = db.session.query(
        func.coalesce(func.sum(Order.total_amount), 0), func.count(Order.id)
    ).one()
    total_expenses = db.session.query(func.coalesce(func.sum(Expense.amount), 0)).scalar()
    total_products = db.session.query(func.count(Product.id)).scalar()
    average = float(revenue) / order_count if order_count else 0.0
    return {
        "total_revenue": _round(revenue),
        "total_products": int(total_products or 0),
        "total_expenses": _round(total_expenses),
        "average_order_value": round(average, 2),
    }


def get_analytics() -> dict:
    return {
        "sales_by_status": sales_by_status(),
        "products_by_category": products_by_category(),
        "monthly_expenses": monthly_expenses(),
        "key_metrics": key_metrics(),
    }
