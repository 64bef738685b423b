import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bizdash import create_app
from bizdash.core.auth.password import hash_password
from bizdash.core.users.models import User
from bizdash.domains.business import models as business_models  # noqa: F401
from bizdash.extensions import db

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")
    config.addinivalue_line("markers", "slow: Slow running tests")


@pytest.fixture()
def app():
    """Per-test app on a fresh in-memory database."""
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    try:
        yield app
    finally:
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


def _make_user(username: str = ADMIN_USERNAME, password: str = ADMIN_PASSWORD, **fields) -> User:
    scheme = fields.pop("scheme", "bcrypt")
    user = User(username=username, password=hash_password(password, scheme=scheme), **fields)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture()
def make_user(app):
    """Factory for committed users; ``scheme="plaintext"`` stores the raw password."""
    return _make_user


@pytest.fixture()
def admin_user(app):
    return _make_user(full_name="Store Admin", email="admin@example.com")


@pytest.fixture()
def auth_client(client, admin_user):
    """Client holding a logged-in session cookie."""
    resp = client.post("/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.get_json()
    return client
