"""Shared test fixtures and configuration."""
import pytest
import os
from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOGIN_PASSWORD", "testpass123")

from app.main import app
from app.db.models import Base
from app.core.dependencies import get_order_repository
from app.core.config import Settings
from app.services.ordering.models import Address, CatalogItemOrdered, Order, OrderItem
from app.services.persistence.base import OrderRepository
from app.services.persistence.in_memory_orders import InMemoryOrderRepository


# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_USER_NAME = "testuser@example.com"


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    return Settings(
        database_url=TEST_DATABASE_URL,
        login_password="testpass123",
        session_ttl_hours=24,
        catalog_base_url="https://catalog.example.com",
    )


@pytest.fixture
async def test_db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_db(test_db_engine):
    """Create test database session."""
    async_session = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def test_user_name():
    """User name of the signed-in customer."""
    return TEST_USER_NAME


@pytest.fixture
def test_address():
    """Shipping address shared by test orders."""
    return Address(
        street="Street",
        city="City",
        state="State",
        country="Country",
        zip_code="ZipCode",
    )


@pytest.fixture
def test_orders(test_address):
    """Two orders of the test user: 36.25 and 60.00 in total."""
    now = datetime.utcnow()
    return [
        Order(
            id=1,
            buyer_id=TEST_USER_NAME,
            ship_to_address=test_address,
            order_date=now,
            order_items=[
                OrderItem(
                    item_ordered=CatalogItemOrdered(
                        catalog_item_id=1, product_name="Product1", picture_uri="test1.jpg"
                    ),
                    unit_price=Decimal("10.50"),
                    units=2,
                ),
                OrderItem(
                    item_ordered=CatalogItemOrdered(
                        catalog_item_id=2, product_name="Product2", picture_uri="test2.jpg"
                    ),
                    unit_price=Decimal("15.25"),
                    units=1,
                ),
            ],
        ),
        Order(
            id=2,
            buyer_id=TEST_USER_NAME,
            ship_to_address=test_address,
            order_date=now - timedelta(days=1),
            order_items=[
                OrderItem(
                    item_ordered=CatalogItemOrdered(
                        catalog_item_id=3, product_name="Product3", picture_uri="test3.jpg"
                    ),
                    unit_price=Decimal("20.00"),
                    units=3,
                ),
            ],
        ),
    ]


@pytest.fixture
def mock_order_repository():
    """Order repository double that only allows the abstract interface."""
    return AsyncMock(spec=OrderRepository)


@pytest.fixture
def test_orders_path():
    """Return path to test orders YAML file."""
    return Path(__file__).parent / "fixtures" / "test_orders.yaml"


@pytest.fixture
def test_order_repository(test_orders_path):
    """Create order repository with test data."""
    return InMemoryOrderRepository(orders_file=str(test_orders_path))


@pytest.fixture
def override_get_order_repository(test_order_repository):
    """Override get_order_repository dependency with test orders."""
    def _override_get_order_repository():
        return test_order_repository
    return _override_get_order_repository


@pytest.fixture
def test_client(override_get_order_repository, test_settings, monkeypatch):
    """Create FastAPI test client with overrides."""
    # Override dependencies
    app.dependency_overrides[get_order_repository] = override_get_order_repository

    # Override settings in modules that use it
    monkeypatch.setattr("app.core.config.settings", test_settings)
    monkeypatch.setattr("app.api.auth.settings", test_settings)
    monkeypatch.setattr("app.api.health.settings", test_settings)
    monkeypatch.setattr("app.core.dependencies.settings", test_settings)

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()


@pytest.fixture
def authenticated_client(test_client, test_settings):
    """Create test client with valid session cookie."""
    response = test_client.post(
        "/api/auth/login",
        json={"email": TEST_USER_NAME, "password": test_settings.login_password}
    )
    assert response.status_code == 200

    # Session cookie is automatically stored in test_client
    return test_client


@pytest.fixture
def clean_auth_sessions():
    """Clean up authentication sessions before and after tests."""
    from app.api import auth
    auth._sessions.clear()
    yield
    auth._sessions.clear()
