"""
Test configuration and fixtures
"""

import os

# Point the service at SQLite before app modules read their settings
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from unittest.mock import AsyncMock, patch  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.app import app  # noqa: E402
from app.database import get_db  # noqa: E402
from app.models import Base  # noqa: E402

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    # Mock init_db to prevent creating tables on the application engine
    with patch("app.app.init_db"):
        app.dependency_overrides[get_db] = override_get_db
        with TestClient(app) as test_client:
            yield test_client
        app.dependency_overrides.clear()


@pytest.fixture
def mock_order_repository():
    """Repository double whose save echoes the order back."""
    repository = AsyncMock()
    repository.save.side_effect = lambda order: order
    return repository


@pytest.fixture
def failing_order_repository():
    """Repository double whose save always fails."""
    repository = AsyncMock()
    repository.save.side_effect = RuntimeError("connection refused by db-primary:5432")
    return repository


@pytest.fixture
def mock_product_repository():
    repository = AsyncMock()
    repository.save.side_effect = lambda product: product
    return repository


@pytest.fixture
def valid_order_payload():
    """Valid order request body"""
    return {"productIds": [1, 2, 3], "totalPrice": 120}
