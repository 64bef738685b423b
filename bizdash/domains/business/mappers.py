"""Model -> JSON dict mappers for the business domain."""

from __future__ import annotations

from bizdash.domains.business.models import Customer, Expense, Order, OrderItem, Product


def _money(value) -> float:
    return round(float(value), 2) if value is not None else 0.0


def _iso(value):
    return value.isoformat() if value else None


def map_customer(customer: Customer) -> dict:
    return {
        "id": customer.id,
        "name": customer.name,
        "email": customer.email,
        "phone": customer.phone,
        "address": customer.address,
        "created_at": _iso(customer.created_at),
    }


def map_product(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": _money(product.price),
        "stock_quantity": product.stock_quantity,
        "category": product.category,
        "sku": product.sku,
        "created_at": _iso(product.created_at),
    }


def map_order_item(item: OrderItem) -> dict:
    return {
        "id": item.id,
        "product_id": item.product_id,
        "product_name": item.product.name if item.product else None,
        "quantity": item.quantity,
        "unit_price": _money(item.unit_price),
        "total_price": _money(item.total_price),
    }


def map_order_summary(order: Order) -> dict:
    return {
        "id": order.id,
        "customer_id": order.customer_id,
        "customer_name": order.customer.name if order.customer else None,
        "order_date": _iso(order.order_date),
        "status": order.status,
        "total_amount": _money(order.total_amount),
    }


def map_order(order: Order) -> dict:
    return {
        **map_order_summary(order),
        "customer_email": order.customer.email if order.customer else None,
        "items": [map_order_item(item) for item in order.items],
    }


def map_expense(expense: Expense) -> dict:
    return {
        "id": expense.id,
        "description": expense.description,
        "amount": _money(expense.amount),
        "category": expense.category,
        "expense_date": _iso(expense.expense_date),
        "created_at": _iso(expense.created_at),
    }
