"""
Pytest configuration and fixtures for backend tests.

Each test gets a fresh in-memory SQLite database shared between the test
session and the app through a StaticPool, with get_db overridden.
"""
import os
from datetime import datetime, timedelta, timezone

# Settings are read at import time, so the environment is prepared first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
import models.users  # noqa: F401
import models.category  # noqa: F401
from models.feedback import Feedback, FeedbackStatus
from utils.hashing import pwd_context

# Minimum bcrypt cost keeps the suite fast
pwd_context.update(bcrypt__rounds=4)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    from main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, kind, email, password="secret123", username="tester"):
    """Register an admin or user through the API and return the response."""
    return client.post(
        f"/api/auth/{kind}/register",
        json={"username": username, "email": email, "password": password},
    )


def login(client, email, password="secret123"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client):
    register(client, "admin", "boss@example.com")
    response = login(client, "boss@example.com")
    assert response.status_code == 200
    return bearer(response.json()["token"])


@pytest.fixture
def user_headers(client):
    register(client, "user", "jane@example.com")
    response = login(client, "jane@example.com")
    assert response.status_code == 200
    return bearer(response.json()["token"])


@pytest.fixture
def make_feedback(db):
    """Insert feedback rows directly, with creation times one minute apart."""
    base_time = datetime(2025, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make(**fields):
        counter["n"] += 1
        values = {
            "user_id": "u-1",
            "product_id": "p-1",
            "rating": 3,
            "comment": "ok",
            "submitter_name": "Someone",
            "submitter_email": "someone@example.com",
            "status": FeedbackStatus.PENDING,
            "created_at": base_time + timedelta(minutes=counter["n"]),
        }
        values.update(fields)
        feedback = Feedback(**values)
        db.add(feedback)
        db.commit()
        db.refresh(feedback)
        return feedback

    return _make
