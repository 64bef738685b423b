"""Dashboard aggregations."""

from __future__ import annotations

import datetime as dt
from typing import List

from sqlalchemy import func

from bizdash.domains.business.mappers import map_order_summary, map_product
from bizdash.domains.business.models import Customer, Expense, Order, Product
from bizdash.domains.business.services.analytics_service import month_key, month_label
from bizdash.domains.business.services.order_service import recent_orders
from bizdash.domains.business.services.product_service import list_low_stock
from bizdash.extensions import db


def _trailing_months(today: dt.date, count: int) -> List[str]:
    """``count`` month keys ending with ``today``'s month, oldest first."""
    year, month = today.year, today.month
    keys = []
    for _ in range(max(count, 1)):
        keys.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(keys))


def monthly_sales(months: int = 6, today: dt.date | None = None) -> List[dict]:
    keys = _trailing_months(today or dt.date.today(), months)
    first_year, first_month = int(keys[0][:4]), int(keys[0][5:7])
    since = dt.datetime(first_year, first_month, 1)
    totals = {key: 0.0 for key in keys}
    rows = db.session.query(Order.order_date, Order.total_amount).filter(Order.order_date >= since).all()
    for order_date, amount in rows:
        key = month_key(order_date)
        if key in totals:
            totals[key] += float(amount or 0)
    return [{"month": key, "label": month_label(key), "sales": round(totals[key], 2)} for key in keys]


def get_stats() -> dict:
    revenue = float(db.session.query(func.coalesce(func.sum(Order.total_amount), 0)).scalar() or 0)
    expenses = float(db.session.query(func.coalesce(func.sum(Expense.amount), 0)).scalar() or 0)
    return {
        "revenue": round(revenue, 2),
        "products": db.session.query(func.count(Product.id)).scalar() or 0,
        "customers": db.session.query(func.count(Customer.id)).scalar() or 0,
        "expenses": round(expenses, 2),
        "net": round(revenue - expenses, 2),
    }


def get_dashboard(
    *,
    low_stock_threshold: int = 10,
    recent_limit: int = 5,
    sales_months: int = 6,
    today: dt.date | None = None,
) -> dict:
    return {
        "stats": get_stats(),
        "recent_orders": [map_order_summary(o) for o in recent_orders(recent_limit)],
        "low_stock": [map_product(p) for p in list_low_stock(low_stock_threshold)],
        "monthly_sales": monthly_sales(sales_months, today=today),
    }
