"""Pydantic schemas for the business domain."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

OrderStatus = Literal["pending", "completed", "cancelled"]

# Largest value a Numeric(12, 2) column holds.
MAX_MONEY = 9_999_999_999.99


def _money_field(**kwargs):
    return Field(ge=0, le=MAX_MONEY, allow_inf_nan=False, **kwargs)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _required_text(value: Optional[str]) -> Optional[str]:
    # None only reaches here on partial updates, where services skip it.
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


class _CustomerFields(BaseModel):
    @field_validator("name", check_fields=False)
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        return _required_text(v)

    @field_validator("email", "phone", "address", check_fields=False)
    @classmethod
    def blank_optional(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class CustomerCreate(_CustomerFields):
    name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
    address: Optional[str] = None


class CustomerUpdate(_CustomerFields):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
    address: Optional[str] = None


class _ProductFields(BaseModel):
    @field_validator("name", check_fields=False)
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        return _required_text(v)

    @field_validator("description", "category", "sku", check_fields=False)
    @classmethod
    def blank_optional(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class ProductCreate(_ProductFields):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    price: float = _money_field()
    stock_quantity: int = Field(ge=0)
    category: Optional[str] = Field(default=None, max_length=128)
    sku: Optional[str] = Field(default=None, max_length=64)


class ProductUpdate(_ProductFields):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = _money_field(default=None)
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    category: Optional[str] = Field(default=None, max_length=128)
    sku: Optional[str] = Field(default=None, max_length=64)


class OrderItemCreate(BaseModel):
    product_id: str
    quantity: int = Field(ge=1)
    unit_price: Optional[float] = _money_field(default=None)


class OrderCreate(BaseModel):
    customer_id: Optional[str] = None
    status: OrderStatus = "pending"
    order_date: Optional[datetime] = None
    items: List[OrderItemCreate] = Field(min_length=1)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class _ExpenseFields(BaseModel):
    @field_validator("description", check_fields=False)
    @classmethod
    def strip_description(cls, v: Optional[str]) -> Optional[str]:
        return _required_text(v)

    @field_validator("category", check_fields=False)
    @classmethod
    def blank_optional(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class ExpenseCreate(_ExpenseFields):
    description: str = Field(min_length=1, max_length=255)
    amount: float = _money_field()
    category: Optional[str] = Field(default=None, max_length=128)
    expense_date: Optional[date] = None


class ExpenseUpdate(_ExpenseFields):
    description: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[float] = _money_field(default=None)
    category: Optional[str] = Field(default=None, max_length=128)
    expense_date: Optional[date] = None
