import logging

import pytest

from bizdash.core.auth.constants import SESSION_STORAGE_KEY
from bizdash.core.auth.notifications import Severity
from bizdash.core.auth.session_manager import SessionManager
from bizdash.core.auth.session_models import AuthState, UserSession

from fakes import FakeCredentialStore, MemorySessionStore, RecordingNotifier

pytestmark = pytest.mark.unit

ADMIN = UserSession(id="u-1", username="admin", password="hash", full_name="Admin", role="admin")
OTHER = UserSession(id="u-2", username="clerk", password="hash2", role="staff")


def _manager(store=None, credentials=None):
    credentials = credentials or FakeCredentialStore((ADMIN, "admin123"), (OTHER, "clerk123"))
    store = store if store is not None else MemorySessionStore()
    notifier = RecordingNotifier()
    return SessionManager(credentials, store, notifier), credentials, store, notifier


def test_starts_loading_until_restore():
    manager, _, store, notifier = _manager()
    assert manager.state == AuthState.LOADING
    assert manager.current_session is None
    assert not manager.is_authenticated
    assert store.reads == 0

    assert manager.restore() is None
    assert manager.state == AuthState.ANONYMOUS
    assert store.reads == 1
    assert notifier.sent == []


def test_restore_round_trips_persisted_record():
    store = MemorySessionStore({SESSION_STORAGE_KEY: ADMIN.serialize()})
    manager, credentials, _, notifier = _manager(store=store)

    restored = manager.restore()

    assert restored == ADMIN
    assert manager.current_session == ADMIN
    assert manager.is_authenticated
    # Restoring trusts storage; no credential lookup, no notification.
    assert credentials.calls == []
    assert notifier.sent == []


@pytest.mark.parametrize("raw", ["{not json", '{"username": "admin"}', "[]", ""])
def test_restore_discards_malformed_blob(raw, caplog):
    store = MemorySessionStore({SESSION_STORAGE_KEY: raw})
    manager, _, _, notifier = _manager(store=store)

    with caplog.at_level(logging.WARNING):
        assert manager.restore() is None

    assert manager.state == AuthState.ANONYMOUS
    assert notifier.sent == []
    assert any(getattr(r, "auth_error", None) == "malformed_session" for r in caplog.records)
    assert SESSION_STORAGE_KEY not in store.data


def test_malformed_blob_is_cleared_once(caplog):
    store = MemorySessionStore({SESSION_STORAGE_KEY: "{not json"})
    first, _, _, _ = _manager(store=store)
    first.restore()

    caplog.clear()
    with caplog.at_level(logging.WARNING):
        second, _, _, _ = _manager(store=store)
        assert second.restore() is None
    assert not any(getattr(r, "auth_error", None) == "malformed_session" for r in caplog.records)


def test_restore_tolerates_failure_clearing_malformed_blob():
    store = MemorySessionStore({SESSION_STORAGE_KEY: "{not json"})
    store.fail_removes = True
    manager, _, _, notifier = _manager(store=store)

    assert manager.restore() is None
    assert manager.state == AuthState.ANONYMOUS
    assert notifier.sent == []


def test_login_success_persists_and_notifies():
    manager, credentials, store, notifier = _manager()
    manager.restore()

    assert manager.login("admin", "admin123") is True

    assert credentials.calls == [("admin", "admin123")]
    assert manager.current_session == ADMIN
    assert UserSession.deserialize(store.data[SESSION_STORAGE_KEY]) == ADMIN
    assert notifier.sent == [
        ("Login Successful", "Welcome to your business dashboard!", Severity.NORMAL)
    ]


def test_login_failure_leaves_state_and_storage_untouched():
    manager, _, store, notifier = _manager()
    manager.restore()

    assert manager.login("admin", "wrong") is False

    assert manager.state == AuthState.ANONYMOUS
    assert store.data == {}
    assert notifier.sent == [("Login Failed", "Invalid username or password", Severity.DESTRUCTIVE)]


def test_failed_login_while_authenticated_keeps_existing_session():
    manager, _, store, notifier = _manager()
    manager.restore()
    manager.login("admin", "admin123")
    persisted = dict(store.data)

    assert manager.login("clerk", "nope") is False

    assert manager.current_session == ADMIN
    assert store.data == persisted
    assert notifier.titles == ["Login Successful", "Login Failed"]


def test_login_while_authenticated_replaces_session():
    manager, _, store, _ = _manager()
    manager.restore()
    manager.login("admin", "admin123")

    assert manager.login("clerk", "clerk123") is True
    assert manager.current_session == OTHER
    assert UserSession.deserialize(store.data[SESSION_STORAGE_KEY]) == OTHER


def test_failed_login_before_restore_stays_loading():
    manager, _, _, _ = _manager()
    assert manager.login("admin", "wrong") is False
    assert manager.state == AuthState.LOADING


def test_logout_before_restore_lands_anonymous():
    manager, _, _, notifier = _manager()
    manager.logout()
    assert manager.state == AuthState.ANONYMOUS
    assert notifier.titles == ["Logged Out"]


def test_store_fault_is_a_generic_failure(caplog):
    manager, credentials, _, notifier = _manager()
    credentials.fault = "connection refused"
    manager.restore()

    with caplog.at_level(logging.ERROR):
        assert manager.login("admin", "admin123") is False

    assert notifier.titles == ["Login Failed"]
    assert any(getattr(r, "auth_error", None) == "store_fault" for r in caplog.records)


def test_persist_failure_fails_login_without_setting_memory():
    store = MemorySessionStore()
    store.fail_writes = True
    manager, _, _, notifier = _manager(store=store)
    manager.restore()

    assert manager.login("admin", "admin123") is False
    assert manager.state == AuthState.ANONYMOUS
    assert notifier.titles == ["Login Failed"]


def test_logout_is_idempotent_and_always_notifies():
    manager, _, store, notifier = _manager()
    manager.restore()
    manager.login("admin", "admin123")

    manager.logout()
    manager.logout()

    assert manager.state == AuthState.ANONYMOUS
    assert manager.current_session is None
    assert SESSION_STORAGE_KEY not in store.data
    assert notifier.titles == ["Login Successful", "Logged Out", "Logged Out"]
    assert notifier.sent[-1] == ("Logged Out", "You have been successfully logged out", Severity.NORMAL)


def test_logout_swallows_storage_errors():
    store = MemorySessionStore({SESSION_STORAGE_KEY: ADMIN.serialize()})
    store.fail_removes = True
    manager, _, _, notifier = _manager(store=store)
    manager.restore()

    manager.logout()

    assert manager.state == AuthState.ANONYMOUS
    assert notifier.titles == ["Logged Out"]


def test_login_survives_restart():
    store = MemorySessionStore()
    first, _, _, _ = _manager(store=store)
    first.restore()
    first.login("admin", "admin123")

    second, credentials, _, _ = _manager(store=store)
    assert second.restore() == ADMIN
    assert second.is_authenticated
    assert credentials.calls == []

    second.logout()
    third, _, _, _ = _manager(store=store)
    assert third.restore() is None
    assert third.state == AuthState.ANONYMOUS


def test_serialized_record_keeps_every_field():
    record = UserSession(id="u-9", username="ops", password="pw", email="ops@example.com", role="admin")
    assert UserSession.deserialize(record.serialize()) == record
    assert "password" not in record.public_dict()
