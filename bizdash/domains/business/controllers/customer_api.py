"""Customer API controllers."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from bizdash.core.utils.decorators import csrf_protected, login_required
from bizdash.core.utils.pagination import page_args, page_payload
from bizdash.core.utils.validation import not_found, validation_error
from bizdash.domains.business.mappers import map_customer
from bizdash.domains.business.schemas.business_schemas import CustomerCreate, CustomerUpdate
from bizdash.domains.business.services import customer_service

customer_api_bp = Blueprint("customer_api", __name__)


@customer_api_bp.get("")
@login_required
def list_customers():
    page, per_page = page_args()
    customers, total = customer_service.list_customers(page=page, per_page=per_page)
    return jsonify(page_payload([map_customer(c) for c in customers], total, page, per_page))


@customer_api_bp.post("")
@login_required
@csrf_protected
def create_customer():
    payload = request.get_json(silent=True) or {}
    try:
        data = CustomerCreate.model_validate(payload)
    except ValidationError as exc:
        return validation_error(exc)
    customer = customer_service.create_customer(**data.model_dump())
    return jsonify({"ok": True, "customer": map_customer(customer)}), 201


@customer_api_bp.get("/<customer_id>")
@login_required
def get_customer(customer_id: str):
    customer = customer_service.get_customer(customer_id)
    if not customer:
        return not_found()
    return jsonify({"ok": True, "customer": map_customer(customer)})


@customer_api_bp.patch("/<customer_id>")
@login_required
@csrf_protected
def update_customer(customer_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = CustomerUpdate.model_validate(payload)
    except ValidationError as exc:
        return validation_error(exc)
    customer = customer_service.update_customer(customer_id, **data.model_dump(exclude_unset=True))
    if not customer:
        return not_found()
    return jsonify({"ok": True, "customer": map_customer(customer)})


@customer_api_bp.delete("/<customer_id>")
@login_required
@csrf_protected
def delete_customer(customer_id: str):
    if not customer_service.delete_customer(customer_id):
        return not_found()
    return jsonify({"ok": True})
