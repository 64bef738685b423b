"""Business models; imported together so string relationships resolve."""

from bizdash.domains.business.models.customer_models import Customer
from bizdash.domains.business.models.expense_models import Expense
from bizdash.domains.business.models.order_models import (
    ORDER_STATUSES,
    ORDER_STATUS_CANCELLED,
    ORDER_STATUS_COMPLETED,
    ORDER_STATUS_PENDING,
    Order,
    OrderItem,
)
from bizdash.domains.business.models.product_models import Product

__all__ = [
    "Customer",
    "Expense",
    "Order",
    "OrderItem",
    "Product",
    "ORDER_STATUSES",
    "ORDER_STATUS_CANCELLED",
    "ORDER_STATUS_COMPLETED",
    "ORDER_STATUS_PENDING",
]
