"""Construction of SessionManagers for the web and CLI surfaces."""

from __future__ import annotations

from pathlib import Path

from flask import current_app, g

from bizdash.core.auth.credential_store import SqlCredentialStore
from bizdash.core.auth.notifications import ClickNotifier, FlashNotifier
from bizdash.core.auth.session_manager import SessionManager
from bizdash.core.auth.session_store import CookieSessionStore, FileSessionStore

_G_KEY = "session_manager"


def _credential_store() -> SqlCredentialStore:
    return SqlCredentialStore(password_scheme=current_app.config.get("AUTH_PASSWORD_SCHEME", "bcrypt"))


def build_web_session_manager() -> SessionManager:
    """Manager bound to the current request's cookie session."""
    return SessionManager(_credential_store(), CookieSessionStore(), FlashNotifier())


def build_cli_session_manager() -> SessionManager:
    """Manager persisting to a JSON file under the instance folder."""
    path = Path(current_app.config.get("CLI_SESSION_FILE", "cli_session.json"))
    if not path.is_absolute():
        path = Path(current_app.instance_path) / path
    return SessionManager(_credential_store(), FileSessionStore(path), ClickNotifier())


def restore_request_session() -> SessionManager:
    """Build and restore the manager for this request (before_request hook)."""
    manager = build_web_session_manager()
    manager.restore()
    setattr(g, _G_KEY, manager)
    return manager


def current_session_manager() -> SessionManager:
    manager = g.get(_G_KEY)
    if manager is None:
        manager = restore_request_session()
    return manager


__all__ = [
    "build_web_session_manager",
    "build_cli_session_manager",
    "restore_request_session",
    "current_session_manager",
]
