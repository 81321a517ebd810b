import os

# Keep the app's own startup repository off disk
os.environ["STORE_BACKEND"] = "sql"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base
from app.dependencies import get_repository
from app.repositories.product_repository import SqlProductRepository
from app.services.product_service import ProductService


# Create test database (SQLite in-memory for testing)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

test_repository = SqlProductRepository(TestingSessionLocal)


def override_get_repository():
    """Override repository dependency for testing."""
    return test_repository


# Override the dependency
app.dependency_overrides[get_repository] = override_get_repository


@pytest.fixture(scope="function")
def client():
    """Create test client with fresh database for each test."""
    # Create tables
    Base.metadata.create_all(bind=engine)

    with TestClient(app) as test_client:
        yield test_client

    # Drop tables after test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def repository():
    """Repository over a fresh database for direct access in tests."""
    Base.metadata.create_all(bind=engine)

    yield test_repository

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def service(repository):
    """Product handlers wired to the test repository."""
    return ProductService(repository)


@pytest.fixture
def pen():
    """A valid product body."""
    return {"name": "Pen", "category": "Office", "price": 1.5, "available": True}
