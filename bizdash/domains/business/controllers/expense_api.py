"""Expense API controllers."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from bizdash.core.utils.decorators import csrf_protected, login_required
from bizdash.core.utils.pagination import page_args, page_payload
from bizdash.core.utils.validation import not_found, validation_error
from bizdash.domains.business.mappers import map_expense
from bizdash.domains.business.schemas.business_schemas import ExpenseCreate, ExpenseUpdate
from bizdash.domains.business.services import expense_service

expense_api_bp = Blueprint("expense_api", __name__)


@expense_api_bp.get("")
@login_required
def list_expenses():
    page, per_page = page_args()
    expenses, total = expense_service.list_expenses(page=page, per_page=per_page)
    payload = page_payload([map_expense(e) for e in expenses], total, page, per_page)
    payload["total_amount"] = round(expense_service.total_expenses(), 2)
    return jsonify(payload)


@expense_api_bp.post("")
@login_required
@csrf_protected
def create_expense():
    payload = request.get_json(silent=True) or {}
    try:
        data = ExpenseCreate.model_validate(payload)
    except ValidationError as exc:
        return validation_error(exc)
    expense = expense_service.create_expense(**data.model_dump())
    return jsonify({"ok": True, "expense": map_expense(expense)}), 201


@expense_api_bp.get("/<expense_id>")
@login_required
def get_expense(expense_id: str):
    expense = expense_service.get_expense(expense_id)
    if not expense:
        return not_found()
    return jsonify({"ok": True, "expense": map_expense(expense)})


@expense_api_bp.patch("/<expense_id>")
@login_required
@csrf_protected
def update_expense(expense_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = ExpenseUpdate.model_validate(payload)
    except ValidationError as exc:
        return validation_error(exc)
    expense = expense_service.update_expense(expense_id, **data.model_dump(exclude_unset=True))
    if not expense:
        return not_found()
    return jsonify({"ok": True, "expense": map_expense(expense)})


@expense_api_bp.delete("/<expense_id>")
@login_required
@csrf_protected
def delete_expense(expense_id: str):
    if not expense_service.delete_expense(expense_id):
        return not_found()
    return jsonify({"ok": True})
