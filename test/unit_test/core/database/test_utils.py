"""Unit tests for database engine helpers."""

import pytest

from ucsb_api.core.database.utils import create_engine, normalize_database_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@db:5432/app", "postgresql+asyncpg://u:p@db:5432/app"),
        ("postgresql://u:p@db:5432/app", "postgresql+asyncpg://u:p@db:5432/app"),
        ("postgresql+psycopg2://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
        ("postgresql+asyncpg://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
        ("sqlite+aiosqlite:///./ucsb_api.db", "sqlite+aiosqlite:///./ucsb_api.db"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


@pytest.mark.asyncio
async def test_create_engine_for_sqlite():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    try:
        assert engine.url.drivername == "sqlite+aiosqlite"
    finally:
        await engine.dispose()
