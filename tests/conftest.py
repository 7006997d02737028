"""Pytest configuration and fixtures for the user service.

Uses user_service.main:app for HTTP tests. Integration tests get a session on
TEST_DATABASE_URL (default: in-memory SQLite through aiosqlite); tables are
created from ORM metadata and the session is rolled back after each test.
"""

import os
from collections.abc import AsyncIterator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from user_service.infrastructure.persistence import models  # noqa: F401
from user_service.infrastructure.persistence.database import Base, build_session_factory
from user_service.main import app

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test."""
    engine_kwargs: dict[str, Any] = {}
    if TEST_DATABASE_URL.startswith("sqlite"):
        # One shared connection, otherwise every checkout sees a new empty :memory: DB.
        engine_kwargs["poolclass"] = StaticPool
    engine = create_async_engine(TEST_DATABASE_URL, **engine_kwargs)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = build_session_factory(engine)
    try:
        async with session_factory() as session:
            yield session
            await session.rollback()
    finally:
        await engine.dispose()
