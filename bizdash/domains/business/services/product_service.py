"""Product / inventory services."""

from __future__ import annotations

from typing import List, Tuple

from bizdash.domains.business.models import OrderItem, Product
from bizdash.extensions import db

_UPDATABLE = ("name", "description", "price", "stock_quantity", "category", "sku")
_REQUIRED = ("name", "price", "stock_quantity")


def create_product(
    *,
    name: str,
    price: float,
    stock_quantity: int,
    description: str | None = None,
    category: str | None = None,
    sku: str | None = None,
) -> Product:
    product = Product(
        name=name.strip(),
        price=price,
        stock_quantity=stock_quantity,
        description=description,
        category=category,
        sku=sku,
    )
    db.session.add(product)
    db.session.commit()
    return product


def update_product(product_id: str, **fields) -> Product | None:
    product = db.session.get(Product, product_id)
    if not product:
        return None
    for key in _UPDATABLE:
        if key not in fields:
            continue
        if fields[key] is None and key in _REQUIRED:
            continue
        setattr(product, key, fields[key])
    db.session.commit()
    return product


def delete_product(product_id: str) -> bool:
    product = db.session.get(Product, product_id)
    if not product:
        return False
    # Order lines keep their recorded prices; only the link is dropped.
    for item in OrderItem.query.filter_by(product_id=product.id).all():
        item.product = None
    db.session.delete(product)
    db.session.commit()
    return True


def get_product(product_id: str) -> Product | None:
    return db.session.get(Product, product_id)


def list_products(page: int = 1, per_page: int = 50) -> Tuple[List[Product], int]:
    query = Product.query.order_by(Product.name.asc())
    total = query.count()
    items = query.offset((page - 1) * per_page).limit(per_page).all()
    return items, total


def list_low_stock(threshold: int = 10) -> List[Product]:
    """Products with fewer than ``threshold`` units on hand, scarcest first."""
    return (
        Product.query.filter(Product.stock_quantity < threshold)
        .order_by(Product.stock_quantity.asc(), Product.name.asc())
        .all()
    )
