"""Auth constants: storage key, schemes and user-facing notification texts."""

from __future__ import annotations

# Key under which the serialized session lives in every PersistentSession.
SESSION_STORAGE_KEY = "admin_user"

PASSWORD_SCHEME_BCRYPT = "bcrypt"
PASSWORD_SCHEME_PLAINTEXT = "plaintext"
PASSWORD_SCHEMES = (PASSWORD_SCHEME_BCRYPT, PASSWORD_SCHEME_PLAINTEXT)

LOGIN_SUCCESS_TITLE = "Login Successful"
LOGIN_SUCCESS_MESSAGE = "Welcome to your business dashboard!"
LOGIN_FAILED_TITLE = "Login Failed"
LOGIN_FAILED_MESSAGE = "Invalid username or password"
LOGOUT_TITLE = "Logged Out"
LOGOUT_MESSAGE = "You have been successfully logged out"

__all__ = [
    "SESSION_STORAGE_KEY",
    "PASSWORD_SCHEME_BCRYPT",
    "PASSWORD_SCHEME_PLAINTEXT",
    "PASSWORD_SCHEMES",
    "LOGIN_SUCCESS_TITLE",
    "LOGIN_SUCCESS_MESSAGE",
    "LOGIN_FAILED_TITLE",
    "LOGIN_FAILED_MESSAGE",
    "LOGOUT_TITLE",
    "LOGOUT_MESSAGE",
]
