"""PersistentSession backends: key/value storage that outlives the process."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol, Union

from flask import session

logger = logging.getLogger(__name__)


class PersistentSession(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class CookieSessionStore:
    """Browser-side storage through Flask's signed session cookie.

    Values are written to a permanent session so they survive browser
    restarts; only an explicit ``remove`` drops them.
    """

    def get(self, key: str) -> Optional[str]:
        return session.get(key)

    def set(self, key: str, value: str) -> None:
        session.permanent = True
        session[key] = value

    def remove(self, key: str) -> None:
        session.pop(key, None)


class FileSessionStore:
    """JSON file holding a flat ``{key: value}`` mapping (used by the CLI)."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)

    def _read(self) -> dict:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Could not read session file %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable session file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        os.replace(tmp_path, self.path)


__all__ = ["PersistentSession", "CookieSessionStore", "FileSessionStore"]
