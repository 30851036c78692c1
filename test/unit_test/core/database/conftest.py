"""Test configuration for database unit tests.

Provides an in-memory SQLite engine with every entity table created and a
session bound to it.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.pool import StaticPool

from ucsb_api.core.database import create_all
from ucsb_api.server.core.config import settings


@pytest_asyncio.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine for testing."""
    engine = create_async_engine(
        settings.database_url,
        echo=False,
        poolclass=StaticPool,
    )
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async_session = sessionmaker(
        bind=in_memory_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:  # type: ignore[attr-defined]
        yield session
