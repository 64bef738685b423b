"""Session record and lifecycle state."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class AuthState(str, enum.Enum):
    """Where a SessionManager sits in its lifecycle."""

    LOADING = "loading"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class UserSession(BaseModel):
    """The authenticated user's record, as read from the users table."""

    id: str
    username: str
    # Whatever the users table holds (a bcrypt hash unless the legacy scheme is on).
    password: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    created_at: Optional[datetime] = None

    # Older blobs may carry fields we no longer know about.
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    def serialize(self) -> str:
        return self.model_dump_json()

    @classmethod
    def deserialize(cls, raw: Union[str, bytes]) -> "UserSession":
        """Parse a stored blob; raises pydantic.ValidationError when malformed."""
        return cls.model_validate_json(raw)

    def public_dict(self) -> dict:
        """JSON-ready view without the stored password."""
        return self.model_dump(mode="json", exclude={"password"})


__all__ = ["AuthState", "UserSession"]
