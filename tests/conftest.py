"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.test_constants import TEST_EMAIL, TEST_PASSWORD, TEST_SECRET_KEY

# Force an in-memory SQLite store when pytest runs; don't inherit from .env
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["SECRET_KEY"] = TEST_SECRET_KEY


@pytest.fixture(autouse=True)
def _clear_settings_caches() -> None:
    """Clear cached settings and token signer so env changes in a test don't leak."""
    from liftlog.api.deps import get_token_signer
    from liftlog.config import get_settings

    get_settings.cache_clear()
    get_token_signer.cache_clear()
    yield
    get_settings.cache_clear()
    get_token_signer.cache_clear()


@pytest.fixture
def db() -> Session:
    """Database session on a freshly created schema; tables are dropped afterwards."""
    from liftlog.db.session import Base, SessionLocal, engine
    import liftlog.models  # noqa: F401

    Base.metadata.create_all(engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """TestClient with get_db overridden to use the test db session."""
    from liftlog.db.session import get_db
    from liftlog.main import create_app

    app = create_app()

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    c = TestClient(app, raise_server_exceptions=False)
    yield c
    app.dependency_overrides.clear()


@pytest.fixture
def signup_user(client: TestClient):
    """Return a callable that signs up through the API and returns the token."""

    def _signup(email: str = TEST_EMAIL, password: str = TEST_PASSWORD) -> str:
        resp = client.post("/api/user/signup", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return resp.json()["token"]

    return _signup


@pytest.fixture
def auth_headers(signup_user) -> dict[str, str]:
    """Authorization header for a freshly signed-up user."""
    return {"Authorization": f"Bearer {signup_user()}"}
