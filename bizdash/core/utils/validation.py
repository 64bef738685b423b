"""Request body validation helpers."""

from __future__ import annotations

from flask import jsonify
from pydantic import ValidationError


def validation_error(exc: ValidationError):
    """400 response carrying pydantic's error list (ctx values stringified)."""
    errors = exc.errors(include_url=False, include_input=False)
    for err in errors:
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
    return jsonify({"ok": False, "error": "validation_error", "details": errors}), 400


def not_found():
    return jsonify({"ok": False, "error": "not_found"}), 404
