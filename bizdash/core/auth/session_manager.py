"""Authenticated-user lifecycle: restore, login, logout.

A SessionManager starts in ``LOADING``. ``restore()`` moves it to
``ANONYMOUS`` or ``AUTHENTICATED`` from whatever the PersistentSession holds;
afterwards ``login`` and ``logout`` move it between those two. Every failure
is handled here: callers only ever see a boolean from ``login`` and a
user-facing notification.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from bizdash.core.auth.constants import (
    LOGIN_FAILED_MESSAGE,
    LOGIN_FAILED_TITLE,
    LOGIN_SUCCESS_MESSAGE,
    LOGIN_SUCCESS_TITLE,
    LOGOUT_MESSAGE,
    LOGOUT_TITLE,
    SESSION_STORAGE_KEY,
)
from bizdash.core.auth.credential_store import AuthErrorKind, CredentialStore, Err
from bizdash.core.auth.notifications import Notifier, Severity
from bizdash.core.auth.session_models import AuthState, UserSession
from bizdash.core.auth.session_store import PersistentSession

logger = logging.getLogger(__name__)


class SessionManager:
    def __init__(
        self,
        credentials: CredentialStore,
        storage: PersistentSession,
        notifier: Notifier,
        *,
        storage_key: str = SESSION_STORAGE_KEY,
    ):
        self.credentials = credentials
        self.storage = storage
        self.notifier = notifier
        self.storage_key = storage_key
        self._session: Optional[UserSession] = None
        self._state = AuthState.LOADING

    @property
    def current_session(self) -> Optional[UserSession]:
        return self._session

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state == AuthState.AUTHENTICATED

    def restore(self) -> Optional[UserSession]:
        """Load the persisted session, if any. Never raises."""
        raw = self.storage.get(self.storage_key)
        restored = None
        if raw is not None:
            try:
                restored = UserSession.deserialize(raw)
            except (ValidationError, TypeError) as exc:
                logger.warning(
                    "Discarding malformed persisted session: %s",
                    exc,
                    extra={"auth_error": AuthErrorKind.MALFORMED_SESSION.value},
                )
                self._discard_stored_session()
        self._set_session(restored)
        return restored

    def login(self, username: str, password: str) -> bool:
        result = self.credentials.find_one(username, password)
        if isinstance(result, Err):
            self._log_failure(username, result)
            return self._fail_login()

        # Persist before touching memory so a failed write leaves state as it was.
        try:
            self.storage.set(self.storage_key, result.record.serialize())
        except OSError as exc:
            self._log_failure(username, Err(AuthErrorKind.STORE_FAULT, detail=f"persist failed: {exc}"))
            return self._fail_login()

        self._set_session(result.record)
        logger.info("User %r logged in", username)
        self.notifier.notify(LOGIN_SUCCESS_TITLE, LOGIN_SUCCESS_MESSAGE)
        return True

    def logout(self) -> None:
        self._set_session(None)
        self._discard_stored_session()
        self.notifier.notify(LOGOUT_TITLE, LOGOUT_MESSAGE)

    def _discard_stored_session(self) -> None:
        try:
            self.storage.remove(self.storage_key)
        except OSError as exc:
            logger.error("Could not clear persisted session: %s", exc)

    def _set_session(self, record: Optional[UserSession]) -> None:
        self._session = record
        self._state = AuthState.AUTHENTICATED if record is not None else AuthState.ANONYMOUS

    def _fail_login(self) -> bool:
        self.notifier.notify(LOGIN_FAILED_TITLE, LOGIN_FAILED_MESSAGE, Severity.DESTRUCTIVE)
        return False

    @staticmethod
    def _log_failure(username: str, error: Err) -> None:
        log = logger.error if error.kind == AuthErrorKind.STORE_FAULT else logger.warning
        log(
            "Login failed for %r (%s): %s",
            username,
            error.kind.value,
            error.detail,
            extra={"auth_error": error.kind.value, "username": username},
        )


__all__ = ["SessionManager"]
