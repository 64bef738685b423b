"""In-memory collaborators for SessionManager tests."""

from __future__ import annotations

from typing import Optional

from bizdash.core.auth.credential_store import AuthErrorKind, Err, Ok
from bizdash.core.auth.notifications import Severity
from bizdash.core.auth.session_models import UserSession


class FakeCredentialStore:
    def __init__(self, *records: tuple[UserSession, str]):
        self.records = list(records)
        self.calls: list[tuple[str, str]] = []
        self.fault: Optional[str] = None

    def find_one(self, username: str, password: str):
        self.calls.append((username, password))
        if self.fault:
            return Err(AuthErrorKind.STORE_FAULT, detail=self.fault)
        matches = [r for r, pw in self.records if r.username == username and pw == password]
        if len(matches) != 1:
            return Err(AuthErrorKind.INVALID_CREDENTIALS, detail=f"{len(matches)} matches")
        return Ok(matches[0])


class MemorySessionStore:
    def __init__(self, initial: Optional[dict] = None):
        self.data: dict = dict(initial or {})
        self.fail_writes = False
        self.fail_removes = False
        self.reads = 0

    def get(self, key):
        self.reads += 1
        return self.data.get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise OSError("quota exceeded")
        self.data[key] = value

    def remove(self, key):
        if self.fail_removes:
            raise OSError("storage unavailable")
        self.data.pop(key, None)


class RecordingNotifier:
    def __init__(self):
        self.sent: list[tuple[str, Optional[str], Severity]] = []

    def notify(self, title, description=None, severity=Severity.NORMAL):
        self.sent.append((title, description, severity))

    @property
    def titles(self) -> list[str]:
        return [title for title, _, _ in self.sent]
