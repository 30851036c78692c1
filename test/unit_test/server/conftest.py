from typing import AsyncGenerator, Callable, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.pool import StaticPool


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database with every entity table."""
    from ucsb_api.core.database import create_all
    from ucsb_api.server.core.config import settings

    # test/conftest.py points DATABASE_URL at in-memory SQLite
    engine = create_async_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async_session_maker = sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session_maker() as session:  # type: ignore[attr-defined]
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the test session."""
    from ucsb_api.server.core.database import get_session
    from ucsb_api.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[..., Dict[str, str]]:
    """Build an ``Authorization`` header for a caller holding the given roles."""
    from ucsb_api.server.services.auth import create_access_token

    def _headers(*roles: str, email: str = "user@ucsb.edu") -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(email, roles)}"}

    return _headers


@pytest.fixture
def user_headers(auth_headers) -> Dict[str, str]:
    """A logged-in regular user."""
    return auth_headers("USER")


@pytest.fixture
def admin_headers(auth_headers) -> Dict[str, str]:
    """A logged-in admin (admins also hold the user role)."""
    return auth_headers("ADMIN", "USER", email="admin@ucsb.edu")


@pytest.fixture
def override_repository():
    """Replace a repository dependency with a mock for the duration of a test."""
    from ucsb_api.server.main import app

    def _override(dependency, repository):
        app.dependency_overrides[dependency] = lambda: repository
        return repository

    yield _override

    app.dependency_overrides.clear()
