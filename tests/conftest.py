# /tests/conftest.py

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core import security
from app.core.deps import get_llm_client
from app.db.base import Base
from app.db.database import get_db
from app.main import app
from app.services.database_service import DatabaseService


@pytest.fixture
def db_session():
    """
    Provides a session bound to a fresh in-memory SQLite database for EACH
    test function, with every table created.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def mock_llm():
    """An LLMClient stand-in whose generate_text returns whatever a test sets."""
    llm = MagicMock()
    llm.generate_text = AsyncMock(return_value="")
    return llm


@pytest.fixture
def client(db_session, mock_llm):
    """A TestClient wired to the in-memory database and the mock LLM."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm_client] = lambda: mock_llm
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_service):
    """Factory that stores a user (with credential) and returns it."""
    counter = {"n": 0}

    def _make_user(is_premium=False, password="correct-horse"):
        counter["n"] += 1
        n = counter["n"]
        user = db_service.create_user_with_credential(
            {"id": f"usr_{n}", "name": f"User {n}", "email": f"user{n}@example.com", "is_premium": is_premium},
            {"id": f"cred_{n}", "user_id": f"usr_{n}", "hashed_password": security.get_password_hash(password)},
        )
        return user

    return _make_user


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        token = security.create_access_token(subject=user.id)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
