"""Product / inventory API controllers."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from bizdash.core.utils.decorators import csrf_protected, login_required
from bizdash.core.utils.pagination import page_args, page_payload
from bizdash.core.utils.validation import not_found, validation_error
from bizdash.domains.business.mappers import map_product
from bizdash.domains.business.schemas.business_schemas import ProductCreate, ProductUpdate
from bizdash.domains.business.services import product_service

product_api_bp = Blueprint("product_api", __name__)


@product_api_bp.get("")
@login_required
def list_products():
    page, per_page = page_args()
    products, total = product_service.list_products(page=page, per_page=per_page)
    return jsonify(page_payload([map_product(p) for p in products], total, page, per_page))


@product_api_bp.get("/low-stock")
@login_required
def low_stock():
    threshold = request.args.get("threshold", current_app.config.get("LOW_STOCK_THRESHOLD", 10), type=int)
    products = product_service.list_low_stock(threshold)
    return jsonify({"ok": True, "threshold": threshold, "items": [map_product(p) for p in products]})


@product_api_bp.post("")
@login_required
@csrf_protected
def create_product():
    payload = request.get_json(silent=True) or {}
    try:
        data = ProductCreate.model_validate(payload)
    except ValidationError as exc:
        return validation_error(exc)
    product = product_service.create_product(**data.model_dump())
    return jsonify({"ok": True, "product": map_product(product)}), 201


@product_api_bp.get("/<product_id>")
@login_required
def get_product(product_id: str):
    product = product_service.get_product(product_id)
    if not product:
        return not_found()
    return jsonify({"ok": True, "product": map_product(product)})


@product_api_bp.patch("/<product_id>")
@login_required
@csrf_protected
def update_product(product_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = ProductUpdate.model_validate(payload)
    except ValidationError as exc:
        return validation_error(exc)
    product = product_service.update_product(product_id, **data.model_dump(exclude_unset=True))
    if not product:
        return not_found()
    return jsonify({"ok": True, "product": map_product(product)})


@product_api_bp.delete("/<product_id>")
@login_required
@csrf_protected
def delete_product(product_id: str):
    if not product_service.delete_product(product_id):
        return not_found()
    return jsonify({"ok": True})
