"""
Acme Flavors Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Tests run against a throwaway SQLite file (aiosqlite) so the real
       schema, RETURNING queries and seeding are exercised without Postgres.

Fixture Hierarchy (all function-scoped):
    ├── test_settings:   Settings pointing at tmp_path/flavors.db
    ├── database:        Database with the table rebuilt and seeded
    ├── mock_db_session: AsyncMock session for failure paths
    ├── test_client:     HTTPX AsyncClient, lifespan started (seeded store)
    └── legacy_client:   Same, with LEGACY_NOT_FOUND enabled
"""

import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Keep the module-level settings away from any real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from flavors_api.config import Settings
from flavors_api.database import Database
from flavors_api.main import create_app
from flavors_api.services.seed import rebuild_schema


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings bound to a fresh SQLite file for each test."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'flavors.db'}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings) -> AsyncGenerator[Database, None]:
    """A Database whose flavors table holds exactly the three seed rows."""
    db = Database(test_settings)
    await rebuild_schema(db)
    yield db
    await db.dispose()


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError(...)
        result = await FlavorRepository(mock_db_session).list_flavors()
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


async def _client_for(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    # ASGITransport does not send lifespan events; run the lifespan explicitly
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest_asyncio.fixture
async def app(test_settings) -> FastAPI:
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to a freshly started app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/flavors")
            assert response.status_code == 200
    """
    async for client in _client_for(app):
        yield client


@pytest_asyncio.fixture
async def legacy_client(test_settings) -> AsyncGenerator[AsyncClient, None]:
    """Client for an app that answers unknown ids with 200 and null."""
    settings = test_settings.model_copy(update={"legacy_not_found": True})
    async for client in _client_for(create_app(settings)):
        yield client
