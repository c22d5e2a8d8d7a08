"""Integration test fixtures for database and HTTP client operations.

Each test gets its own SQLite database file built from the model metadata,
an app whose session factory, byte store and broadcaster point at
test-owned instances, and an httpx client bound to that app.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from src.fieldops import models  # noqa: F401
from src.fieldops.api.dependencies import get_session_factory
from src.fieldops.core.db import get_session
from src.fieldops.main import create_app
from src.fieldops.realtime import Broadcaster, RoomHub, get_broadcaster
from src.fieldops.storage import LocalByteStore, get_byte_store
from tests.helpers import TenantWorld, create_tenant_world


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a throwaway database with every table in place."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        poolclass=NullPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging data.

    Tests must call ``await session.commit()`` before the app can see their
    rows. To read what the app wrote, open a fresh session with ``fresh_session``.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def fresh_session(engine: AsyncEngine):
    """Factory for new sessions that see the latest committed state."""

    def _open() -> AsyncSession:
        return AsyncSession(engine, expire_on_commit=False)

    return _open


@pytest.fixture
def hub() -> RoomHub:
    return RoomHub()


@pytest.fixture
def broadcaster(hub: RoomHub) -> Broadcaster:
    return Broadcaster(hub)


@pytest.fixture
def byte_store(tmp_path: Path) -> LocalByteStore:
    return LocalByteStore(tmp_path / "uploads")


@pytest.fixture
def app(engine: AsyncEngine, broadcaster: Broadcaster, byte_store: LocalByteStore) -> FastAPI:
    application = create_app()
    application.dependency_overrides[get_session_factory] = lambda: lambda: get_session(engine)
    application.dependency_overrides[get_broadcaster] = lambda: broadcaster
    application.dependency_overrides[get_byte_store] = lambda: byte_store
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def world(db_session: AsyncSession) -> TenantWorld:
    """The tenant most tests act in."""
    return await create_tenant_world(db_session)


@pytest.fixture
async def other_world(db_session: AsyncSession) -> TenantWorld:
    """A second, unrelated tenant for isolation checks."""
    return await create_tenant_world(db_session)
