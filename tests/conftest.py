# tests/conftest.py
import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import Base

# In-memory SQLite shared by every connection of the test engine
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Fresh schema per test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """TestClient whose requests share the test session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def mock_db_session():
    """Mocked Session with chainable query()"""
    session = MagicMock(spec=Session)
    session.query.return_value.filter.return_value = session.query.return_value
    session.query.return_value.order_by.return_value = session.query.return_value
    session.query.return_value.offset.return_value = session.query.return_value
    session.query.return_value.limit.return_value = session.query.return_value
    return session


@pytest.fixture
def create_room(client):
    def _create(**fields):
        response = client.post("/api/v1/rooms", json=fields)
        assert response.status_code == 200, response.text
        return response.json()["data"]
    return _create


@pytest.fixture
def create_student(client):
    def _create(**fields):
        response = client.post("/api/v1/students", json=fields)
        assert response.status_code == 200, response.text
        return response.json()["data"]
    return _create
