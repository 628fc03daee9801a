"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import os

# Set environment before any app module imports config
os.environ.setdefault('RUNTIME_ENVIRONMENT', 'TEST')
os.environ.setdefault('DB_URL', 'sqlite+aiosqlite:///:memory:')
os.environ.setdefault('STORAGE_BACKEND', 'sql')
os.environ['CHECKOUT_PROCESSING_DELAY_SECONDS'] = '0'

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from enums.product_category import ProductCategory
from models.product import ProductDTO
from models.user import ActorDTO
from storage.local import LocalStorage
from storage.sql import SQLStorage


# ============================================================================
# Storage Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """Create test database engine (file-based SQLite, one per test)."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'storefront_test.db'}",
        echo=False
    )

    from db import create_db_and_tables
    await create_db_and_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def sql_storage(test_engine):
    """Relational backend bound to the test engine."""
    return SQLStorage(async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False))


@pytest.fixture
def local_storage(tmp_path):
    """Local key-value backend writing to a temporary JSON file."""
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture(params=["sql", "local"])
def storage(request):
    """Runs the test once per storage backend."""
    return request.getfixturevalue(f"{request.param}_storage")


# ============================================================================
# Actor Fixtures
# ============================================================================

@pytest.fixture
def admin_actor():
    return ActorDTO(id="admin-1", is_admin=True)


@pytest.fixture
def customer_actor():
    return ActorDTO(id="customer-1", is_admin=False)


@pytest.fixture
def other_customer_actor():
    return ActorDTO(id="customer-2", is_admin=False)


# ============================================================================
# Catalog Fixtures
# ============================================================================

@pytest.fixture
def sofa():
    return ProductDTO(id=1, name="Velvet Sofa", price=25000, category=ProductCategory.LIVING_ROOM,
                      image="https://example.com/sofa.jpg")


@pytest.fixture
def lamp():
    return ProductDTO(id=2, name="Floor Lamp", price=5000, category=ProductCategory.LIVING_ROOM)


@pytest.fixture
def desk():
    return ProductDTO(id=3, name="Oak Desk", price=10000, category=ProductCategory.OFFICE)
