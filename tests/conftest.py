"""
Test configuration and fixtures for CRM Core
"""

import uuid
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from crm_core import models  # noqa: F401  registers every table
from crm_core.core.database import Base, configure_sqlite, get_db
from crm_core.hooks import HookRegistry
from crm_core.main import app

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """In-memory database with every entity table."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    configure_sqlite(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(test_db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override."""
    async def get_test_db():
        yield test_db

    app.dependency_overrides[get_db] = get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def organization_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def tenant_headers(organization_id, user_id):
    """Headers identifying the tenant and acting user."""
    return {
        "X-Organization-Id": str(organization_id),
        "X-User-Id": str(user_id),
    }


@pytest.fixture
def hook_registry() -> HookRegistry:
    """Isolated hook registry."""
    return HookRegistry()


@pytest.fixture
def sample_company_data():
    """Sample company data for testing."""
    return {
        "name": "Acme Corporation",
        "legal_name": "Acme Corporation S.A.",
        "industry": "Manufacturing",
        "email": "contact@acme.example",
        "employee_count": 250,
        "annual_revenue": "1250000.50",
    }
