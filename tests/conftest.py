"""
Pytest configuration and shared fixtures for all tests.

Every test runs against a fresh in-memory SQLite database. The app's
database session and settings dependencies are overridden, so no real
PostgreSQL server or .env file is needed.
"""

import os

# Set before the app is imported: config reads the environment at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DB_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from buildmate.core.config import Settings, get_settings
from buildmate.db.database import get_db
from buildmate.db.models import Base
from buildmate.main import app

TEST_SECRET = "test-secret"


@pytest.fixture
def engine():
    """
    One in-memory database shared by every connection of the test.
    StaticPool keeps the single connection alive so the tables persist.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """A session for tests that talk to the stores directly."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def test_settings():
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET=TEST_SECRET,
        ACCESS_TOKEN_EXPIRE_MINUTES=60,
        DB_CREATE_TABLES=False,
    )


@pytest.fixture
def client(session_factory, test_settings):
    """
    TestClient wired to the test database and settings.
    Not used as a context manager, so the startup boot check does not run.
    """
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client):
    """Factory: signs a user up, logs in, and returns the bearer token."""
    def _register_and_login(email: str = "alice@x.com", password: str = "pw123") -> str:
        response = client.post("/api/signup", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        response = client.post("/api/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _register_and_login


@pytest.fixture
def auth_headers(register_and_login):
    token = register_and_login()
    return {"Authorization": f"Bearer {token}"}
