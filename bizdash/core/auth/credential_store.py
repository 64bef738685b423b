"""Credential lookup against the users table.

``find_one`` never raises for expected failures: it hands back an ``Ok`` with
the matched record or an ``Err`` naming what went wrong, and the caller
matches on the two.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol, Union

from sqlalchemy.exc import SQLAlchemyError

from bizdash.core.auth.constants import PASSWORD_SCHEME_BCRYPT, PASSWORD_SCHEMES, PASSWORD_SCHEME_PLAINTEXT
from bizdash.core.auth.password import verify_password
from bizdash.core.auth.session_models import UserSession
from bizdash.core.users.models import User
from bizdash.extensions import db

logger = logging.getLogger(__name__)


class AuthErrorKind(str, enum.Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    STORE_FAULT = "store_fault"
    MALFORMED_SESSION = "malformed_session"


@dataclass(frozen=True)
class Ok:
    record: UserSession


@dataclass(frozen=True)
class Err:
    kind: AuthErrorKind
    detail: str = ""


LookupResult = Union[Ok, Err]


class CredentialStore(Protocol):
    def find_one(self, username: str, password: str) -> LookupResult:
        """Return the single user matching both username and password."""
        ...


class SqlCredentialStore:
    """CredentialStore over the ``users`` table."""

    def __init__(self, session=None, password_scheme: str = PASSWORD_SCHEME_BCRYPT):
        if password_scheme not in PASSWORD_SCHEMES:
            raise ValueError(f"unknown password scheme: {password_scheme}")
        self._session = session or db.session
        self.password_scheme = password_scheme

    def find_one(self, username: str, password: str) -> LookupResult:
        try:
            matches = self._matching_users(username, password)
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.error("Credential lookup failed for %r: %s", username, exc)
            return Err(AuthErrorKind.STORE_FAULT, detail=str(exc))

        if not matches:
            return Err(AuthErrorKind.INVALID_CREDENTIALS, detail="no matching user")
        if len(matches) > 1:
            return Err(
                AuthErrorKind.INVALID_CREDENTIALS,
                detail=f"{len(matches)} users match the given credentials",
            )
        return Ok(UserSession.model_validate(matches[0]))

    def _matching_users(self, username: str, password: str) -> list[User]:
        query = self._session.query(User).filter(User.username == username)
        if self.password_scheme == PASSWORD_SCHEME_PLAINTEXT:
            # Two rows are enough to tell "unique" from "ambiguous".
            return query.filter(User.password == password).limit(2).all()
        return [user for user in query.all() if verify_password(password, user.password)]


__all__ = [
    "AuthErrorKind",
    "CredentialStore",
    "Err",
    "LookupResult",
    "Ok",
    "SqlCredentialStore",
]
