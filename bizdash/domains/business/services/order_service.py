"""Sales order services."""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Tuple

from sqlalchemy.orm import selectinload

from bizdash.core.utils.models import utcnow
from bizdash.domains.business.models import (
    ORDER_STATUS_PENDING,
    ORDER_STATUSES,
    Customer,
    Order,
    OrderItem,
    Product,
)
from bizdash.extensions import db

_CENT = Decimal("0.01")


def _money(value) -> Decimal:
    return Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP)


def _with_details(query):
    return query.options(
        selectinload(Order.customer),
        selectinload(Order.items).selectinload(OrderItem.product),
    )


def create_order(
    *,
    items: Iterable[dict],
    customer_id: str | None = None,
    status: str = ORDER_STATUS_PENDING,
    order_date: datetime | None = None,
) -> Order:
    """Create an order with its lines; the total is the sum of line totals.

    Each item is ``{"product_id", "quantity", "unit_price"?}``; a missing unit
    price falls back to the product's current price.
    """
    if status not in ORDER_STATUSES:
        raise ValueError("invalid_status")
    if customer_id is not None and not db.session.get(Customer, customer_id):
        raise ValueError("not_found")

    order = Order(
        customer_id=customer_id,
        status=status,
        order_date=order_date or utcnow(),
    )
    total = Decimal("0")
    for line in items:
        product = db.session.get(Product, line["product_id"])
        if not product:
            raise ValueError("not_found")
        unit_price = line.get("unit_price")
        unit = _money(product.price if unit_price is None else unit_price)
        line_total = _money(unit * int(line["quantity"]))
        order.items.append(
            OrderItem(
                product_id=product.id,
                quantity=int(line["quantity"]),
                unit_price=unit,
                total_price=line_total,
            )
        )
        total += line_total
    if not order.items:
        raise ValueError("items_required")

    order.total_amount = _money(total)
    db.session.add(order)
    db.session.commit()
    return order


def update_order_status(order_id: str, status: str) -> Order | None:
    if status not in ORDER_STATUSES:
        raise ValueError("invalid_status")
    order = db.session.get(Order, order_id)
    if not order:
        return None
    order.status = status
    db.session.commit()
    return order


def delete_order(order_id: str) -> bool:
    order = db.session.get(Order, order_id)
    if not order:
        return False
    db.session.delete(order)
    db.session.commit()
    return True


def get_order(order_id: str) -> Order | None:
    return _with_details(Order.query.filter_by(id=order_id)).first()


def list_orders(page: int = 1, per_page: int = 50) -> Tuple[List[Order], int]:
    query = Order.query.order_by(Order.order_date.desc())
    total = query.count()
    items = _with_details(query).offset((page - 1) * per_page).limit(per_page).all()
    return items, total


def recent_orders(limit: int = 5) -> List[Order]:
    return _with_details(Order.query.order_by(Order.order_date.desc())).limit(limit).all()
