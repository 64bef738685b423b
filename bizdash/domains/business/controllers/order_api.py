"""Sales order API controllers."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from bizdash.core.utils.decorators import csrf_protected, login_required
from bizdash.core.utils.pagination import page_args, page_payload
from bizdash.core.utils.validation import not_found, validation_error
from bizdash.domains.business.mappers import map_order
from bizdash.domains.business.schemas.business_schemas import OrderCreate, OrderStatusUpdate
from bizdash.domains.business.services import order_service

order_api_bp = Blueprint("order_api", __name__)


@order_api_bp.get("")
@login_required
def list_orders():
    page, per_page = page_args()
    orders, total = order_service.list_orders(page=page, per_page=per_page)
    return jsonify(page_payload([map_order(o) for o in orders], total, page, per_page))


@order_api_bp.post("")
@login_required
@csrf_protected
def create_order():
    payload = request.get_json(silent=True) or {}
    try:
        data = OrderCreate.model_validate(payload)
    except ValidationError as exc:
        return validation_error(exc)
    try:
        order = order_service.create_order(
            items=[item.model_dump() for item in data.items],
            customer_id=data.customer_id,
            status=data.status,
            order_date=data.order_date,
        )
    except ValueError as exc:
        if str(exc) == "not_found":
            return not_found()
        raise
    return jsonify({"ok": True, "order": map_order(order_service.get_order(order.id))}), 201


@order_api_bp.get("/<order_id>")
@login_required
def get_order(order_id: str):
    order = order_service.get_order(order_id)
    if not order:
        return not_found()
    return jsonify({"ok": True, "order": map_order(order)})


@order_api_bp.patch("/<order_id>/status")
@login_required
@csrf_protected
def update_order_status(order_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = OrderStatusUpdate.model_validate(payload)
    except ValidationError as exc:
        return validation_error(exc)
    order = order_service.update_order_status(order_id, data.status)
    if not order:
        return not_found()
    return jsonify({"ok": True, "order": map_order(order_service.get_order(order.id))})


@order_api_bp.delete("/<order_id>")
@login_required
@csrf_protected
def delete_order(order_id: str):
    if not order_service.delete_order(order_id):
        return not_found()
    return jsonify({"ok": True})
