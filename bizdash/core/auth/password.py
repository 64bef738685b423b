"""Password hashing helpers."""

from bizdash.core.auth.constants import PASSWORD_SCHEME_PLAINTEXT
from bizdash.extensions import bcrypt


def hash_password(plain_password: str, scheme: str = "bcrypt") -> str:
    """Return the value to store in ``users.password`` for the given scheme."""
    if scheme == PASSWORD_SCHEME_PLAINTEXT:
        return plain_password
    return bcrypt.generate_password_hash(plain_password).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Validate a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.check_password_hash(hashed_password, plain_password)
    except ValueError:
        # Stored value is not a bcrypt hash (e.g. a legacy plaintext row).
        return False
