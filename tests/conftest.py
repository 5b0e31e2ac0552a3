"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.memory.database import InMemoryDatabase
from infrastructure.memory.memory_uow import InMemoryUnitOfWork


@pytest.fixture
def database() -> InMemoryDatabase:
    """A fresh database with the default member types seeded."""
    return InMemoryDatabase()


@pytest.fixture
def uow_factory(database: InMemoryDatabase):
    """Unit of Work factory bound to the test database."""

    def factory() -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(database)

    return factory


@pytest.fixture
async def client(database: InMemoryDatabase) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client over an app that owns the test database."""
    from main import create_app

    app = create_app(database)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
