"""Pytest configuration and fixtures for Jobs API tests."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from jobs_api.database import Base, get_db
from jobs_api.main import app
from jobs_api.models import Job, User
from jobs_api.services import get_credential_service


# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Enable foreign key support for SQLite (required for ON DELETE CASCADE)
@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """Create a test client with database dependency override."""
    def override_get_db():
        try:
            yield db
        except Exception:
            db.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def credentials():
    return get_credential_service()


def _make_user(db, credentials, name, email, password="secret123"):
    user = User(name=name, email=email, password_hash=credentials.hash(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def user(db, credentials):
    """Create the primary test user."""
    return _make_user(db, credentials, "Anna", "anna@example.com")


@pytest.fixture
def other_user(db, credentials):
    """Create a second user for isolation testing."""
    return _make_user(db, credentials, "Bruno", "bruno@example.com")


@pytest.fixture
def auth_headers(user, credentials):
    token = credentials.issue_token(user.id, user.name)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(other_user, credentials):
    token = credentials.issue_token(other_user.id, other_user.name)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_job(db, user):
    """A job owned by the primary test user."""
    job = Job(role="Backend Engineer", company="Acme", status="interview", created_by=user.id)
    db.add(job)
    db.commit()
    db.refresh(job)
    return job
