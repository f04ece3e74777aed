"""
Sample API: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the test suite.
How:   Service tests run against a mocked AsyncSession; route tests run the
       real app over httpx's ASGITransport against a throwaway SQLite file
       (aiosqlite), created fresh for every test.

Fixtures:
    ├── mock_db_session:       AsyncMock standing in for AsyncSession
    ├── database:              Database on an empty temp SQLite file, tables created
    ├── unreachable_database:  Database whose file cannot be opened
    ├── seed_reference_data:   inserts customers and orders
    ├── test_client:           AsyncClient bound to an app using `database`
    └── unreachable_client:    AsyncClient bound to an app using `unreachable_database`
"""

import os
import tempfile
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time; point them at SQLite before any app import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="sample_api_test_"), "default.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from sample_api.database import Database  # noqa: E402
from sample_api.main import create_app  # noqa: E402
from sample_api.models import Customer, Order  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Mocked Session
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock async database session.

    Usage:
        result = MagicMock(rowcount=1)
        mock_db_session.execute.return_value = result
        await agent_service.delete_agent(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# SQLite-backed Databases
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database(tmp_path):
    """A Database on a fresh SQLite file with all three tables created."""
    db = Database(
        f"sqlite+aiosqlite:///{tmp_path / 'sample.db'}",
        pool_size=5,
        pool_timeout=5,
    )
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def unreachable_database(tmp_path):
    """A Database pointing into a directory that does not exist."""
    db = Database(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'sample.db'}",
        pool_size=2,
        pool_timeout=1,
    )
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def seed_reference_data(database):
    """Insert two customers and two orders; returns nothing."""
    async with database.session() as session:
        session.add_all([
            Customer(name="Jane Doe", city="Los Angeles"),
            Customer(name="Sam Roe", city="Chicago"),
            Order(order_date=date(2023, 10, 1), amount=Decimal("100.50")),
            Order(order_date=date(2023, 11, 15), amount=Decimal("42.00")),
        ])
        await session.commit()


# ══════════════════════════════════════════════════════════════════════════
# HTTP Clients
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(database):
    """
    An httpx AsyncClient talking to an app backed by `database`.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/agents")
            assert response.status_code == 200
    """
    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def unreachable_client(unreachable_database):
    """An httpx AsyncClient whose storage cannot be reached."""
    app = create_app(database=unreachable_database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
