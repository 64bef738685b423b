from datetime import date, datetime
from decimal import Decimal

import pytest

from bizdash.domains.business.models import Expense, Order, Product
from bizdash.domains.business.services import analytics_service
from bizdash.extensions import db

pytestmark = pytest.mark.integration


def _seed():
    db.session.add_all(
        [
            Product(name="A", price=1, stock_quantity=1, category="Tools"),
            Product(name="B", price=1, stock_quantity=1, category="Tools"),
            Product(name="C", price=1, stock_quantity=1, category=None),
            Product(name="D", price=1, stock_quantity=1, category="  "),
            Order(order_date=datetime(2026, 1, 5), status="completed", total_amount=Decimal("30.00")),
            Order(order_date=datetime(2026, 1, 6), status="completed", total_amount=Decimal("20.00")),
            Order(order_date=datetime(2026, 2, 1), status="pending", total_amount=Decimal("10.00")),
            Expense(description="Rent", amount=Decimal("100.00"), expense_date=date(2026, 1, 1)),
            Expense(description="Ads", amount=Decimal("25.50"), expense_date=date(2026, 1, 20)),
            Expense(description="Power", amount=Decimal("40.00"), expense_date=date(2026, 3, 3)),
        ]
    )
    db.session.commit()


def test_sales_by_status(app):
    _seed()
    assert analytics_service.sales_by_status() == [
        {"status": "completed", "amount": 50.0},
        {"status": "pending", "amount": 10.0},
    ]


def test_products_by_category_groups_blank_as_uncategorized(app):
    _seed()
    assert analytics_service.products_by_category() == [
        {"category": "Tools", "count": 2},
        {"category": "Uncategorized", "count": 2},
    ]


def test_monthly_expenses_only_lists_months_with_spend(app):
    _seed()
    assert analytics_service.monthly_expenses() == [
        {"month": "2026-01", "label": "Jan", "amount": 125.5},
        {"month": "2026-03", "label": "Mar", "amount": 40.0},
    ]


def test_key_metrics(app):
    _seed()
    assert analytics_service.key_metrics() == {
        "total_revenue": 60.0,
        "total_products": 4,
        "total_expenses": 165.5,
        "average_order_value": 20.0,
    }


def test_analytics_endpoint(auth_client):
    data = auth_client.get("/api/analytics").get_json()
    assert data["ok"] is True
    assert data["sales_by_status"] == []
    assert data["products_by_category"] == []
    assert data["monthly_expenses"] == []
    assert data["key_metrics"]["average_order_value"] == 0.0
