"""Dashboard and analytics API."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from bizdash.core.utils.decorators import login_required
from bizdash.domains.business.services.analytics_service import get_analytics
from bizdash.domains.business.services.dashboard_service import get_dashboard

dashboard_api_bp = Blueprint("dashboard_api", __name__)


@dashboard_api_bp.get("/dashboard")
@login_required
def dashboard():
    cfg = current_app.config
    data = get_dashboard(
        low_stock_threshold=cfg.get("LOW_STOCK_THRESHOLD", 10),
        recent_limit=cfg.get("RECENT_ORDERS_LIMIT", 5),
        sales_months=cfg.get("DASHBOARD_SALES_MONTHS", 6),
    )
    return jsonify({"ok": True, **data})


@dashboard_api_bp.get("/analytics")
@login_required
def analytics():
    return jsonify({"ok": True, **get_analytics()})
