"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from jsonpulse.database import Base, get_db
from jsonpulse.main import app

DEFAULT_PASSWORD = "testpass123"  # noqa: S105

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use a sibling PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").rsplit("/", 1)[0] + "/jsonpulse_test"
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.drop_all(bind=engine)
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


def signup(client, email: str, password: str = DEFAULT_PASSWORD, **extra):
    """Register a user; the session cookie lands in the client's cookie jar."""
    payload = {
        "firstName": "Test",
        "lastName": "User",
        "email": email,
        "password": password,
        **extra,
    }
    return client.post("/api/auth/signup", json=payload)


def login(client, email: str, password: str = DEFAULT_PASSWORD):
    """Log in, replacing whatever session the client held."""
    return client.post("/api/auth/login", json={"email": email, "password": password})


def save_file(client, file_name: str, content: str):
    return client.post("/api/files", json={"fileName": file_name, "content": content})


@pytest.fixture
def auth_client(client):
    """Client with a signed-in user (alice@example.com)."""
    response = signup(client, "alice@example.com", firstName="Alice", lastName="Smith")
    assert response.status_code == 200
    client.user = response.json()["user"]
    return client


@pytest.fixture
def api_key(auth_client):
    """Generate an API key for the signed-in user."""
    response = auth_client.post("/api/api-key/generate")
    assert response.status_code == 200
    return response.json()["apiKey"]
