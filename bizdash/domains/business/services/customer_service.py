"""Customer CRUD services."""

from __future__ import annotations

from typing import List, Tuple

from bizdash.domains.business.models import Customer
from bizdash.extensions import db

_UPDATABLE = ("name", "email", "phone", "address")
_REQUIRED = ("name",)


def create_customer(
    *,
    name: str,
    email: str | None = None,
    phone: str | None = None,
    address: str | None = None,
) -> Customer:
    customer = Customer(name=name.strip(), email=email, phone=phone, address=address)
    db.session.add(customer)
    db.session.commit()
    return customer


def update_customer(customer_id: str, **fields) -> Customer | None:
    customer = db.session.get(Customer, customer_id)
    if not customer:
        return None
    for key in _UPDATABLE:
        if key not in fields:
            continue
        if fields[key] is None and key in _REQUIRED:
            continue
        setattr(customer, key, fields[key])
    db.session.commit()
    return customer


def delete_customer(customer_id: str) -> bool:
    customer = db.session.get(Customer, customer_id)
    if not customer:
        return False
    # Orders outlive their customer.
    for order in list(customer.orders):
        order.customer = None
    db.session.delete(customer)
    db.session.commit()
    return True


def get_customer(customer_id: str) -> Customer | None:
    return db.session.get(Customer, customer_id)


def list_customers(page: int = 1, per_page: int = 50) -> Tuple[List[Customer], int]:
    query = Customer.query.order_by(Customer.name.asc())
    total = query.count()
    items = query.offset((page - 1) * per_page).limit(per_page).all()
    return items, total
