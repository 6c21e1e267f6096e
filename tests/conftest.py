"""Pytest configuration and fixtures."""

import os
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from grocery_api import database
from grocery_api.database import Base, build_engine, get_db
from grocery_api.main import app
from grocery_api.models.user import User

# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/grocery_tracker", "/grocery_tracker_test"
    )
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from grocery_api import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def app_sessions(monkeypatch):
    """Route the app's own get_db to the test database and record every session it opens."""
    opened = []

    def session_factory():
        session = TestingSessionLocal()
        session.close = MagicMock(wraps=session.close)
        opened.append(session)
        return session

    monkeypatch.setattr(database, "SessionLocal", session_factory)
    app.dependency_overrides.clear()
    with TestClient(app) as test_client:
        yield test_client, opened


@pytest.fixture
def registered_user(client):
    """Register a user through the API and return its credentials and id."""
    credentials = {"name": "Test User", "email": "test@example.com", "password": "testpass123"}
    response = client.post("/api/register", json=credentials)
    assert response.status_code == 200
    return {**credentials, "id": response.json()["id"]}


@pytest.fixture
def make_user(db):
    """Factory creating users directly in the database."""
    counter = {"n": 0}

    def _make_user(name: str | None = None) -> User:
        counter["n"] += 1
        user = User(
            name=name or f"User {counter['n']}",
            email=f"user{counter['n']}@example.com",
            password_hash="fake",
        )
        db.add(user)
        db.commit()
        return user

    return _make_user
