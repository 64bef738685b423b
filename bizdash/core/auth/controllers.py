"""Auth HTTP controllers (API only)."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from bizdash.core.auth.csrf import generate_csrf_token
from bizdash.core.auth.notifications import pop_notifications
from bizdash.core.auth.schemas import LoginRequest
from bizdash.core.auth.session_services import current_session_manager
from bizdash.core.utils.validation import validation_error
from bizdash.extensions import limiter

auth_bp = Blueprint("auth_api", __name__)


@auth_bp.post("/login")
@limiter.limit("10/minute")
def login():
    payload = request.get_json(silent=True) or {}
    try:
        data = LoginRequest.model_validate(payload)
    except ValidationError as exc:
        return validation_error(exc)
    manager = current_session_manager()
    if not manager.login(data.username, data.password):
        return (
            jsonify({"ok": False, "error": "login_failed", "notifications": pop_notifications()}),
            401,
        )
    return jsonify(
        {
            "ok": True,
            "user": manager.current_session.public_dict(),
            "csrf_token": generate_csrf_token(),
            "notifications": pop_notifications(),
        }
    )


@auth_bp.post("/logout")
def logout():
    current_session_manager().logout()
    return jsonify({"ok": True, "notifications": pop_notifications()})


@auth_bp.get("/me")
def me():
    manager = current_session_manager()
    if not manager.is_authenticated:
        return jsonify({"ok": False, "error": "unauthorized", "state": manager.state.value}), 401
    return jsonify(
        {"ok": True, "state": manager.state.value, "user": manager.current_session.public_dict()}
    )


@auth_bp.get("/csrf")
def csrf():
    return jsonify({"ok": True, "csrf_token": generate_csrf_token()})
