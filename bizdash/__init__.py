"""bizdash application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from flask import Flask

from bizdash.config import config_by_name
from bizdash.extensions import init_extensions

logger = logging.getLogger(__name__)


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the bizdash Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(__name__, instance_path=str(instance_root), instance_relative_config=True)
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)

    instance_root.mkdir(parents=True, exist_ok=True)

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    if db_uri.startswith("sqlite:///") and db_uri != "sqlite:///:memory:":
        db_path = Path(db_uri.replace("sqlite:///", "", 1))
        if not db_path.is_absolute():
            db_path = project_root / db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{db_path}"

    if app.config.get("AUTH_PASSWORD_SCHEME") == "plaintext":
        logger.warning("AUTH_PASSWORD_SCHEME=plaintext: passwords are compared without hashing")

    init_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)
    _register_auth_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    @app.get("/api/v1/ping")
    def ping():
        """Lightweight endpoint for load-balancer health checks."""
        return {"pong": True}, 200

    from bizdash.scripts.auth_cli import register_commands

    register_commands(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from bizdash.core.auth.controllers import auth_bp  # local import to avoid circulars
    from bizdash.domains.business.controllers.customer_api import customer_api_bp
    from bizdash.domains.business.controllers.dashboard_api import dashboard_api_bp
    from bizdash.domains.business.controllers.expense_api import expense_api_bp
    from bizdash.domains.business.controllers.order_api import order_api_bp
    from bizdash.domains.business.controllers.product_api import product_api_bp

    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(customer_api_bp, url_prefix="/api/customers")
    app.register_blueprint(product_api_bp, url_prefix="/api/products")
    app.register_blueprint(order_api_bp, url_prefix="/api/orders")
    app.register_blueprint(expense_api_bp, url_prefix="/api/expenses")
    app.register_blueprint(dashboard_api_bp, url_prefix="/api")


def _register_error_handlers(app: Flask) -> None:
    """Basic JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500


def _register_auth_handlers(app: Flask) -> None:
    """Restore the stored admin session before each request."""
    from bizdash.core.auth.session_services import restore_request_session

    @app.before_request
    def _restore_session():
        restore_request_session()
