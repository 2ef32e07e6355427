"""
SocialNet Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment is pointed at a throwaway SQLite file BEFORE any
       `socialnet` import, so the module-level settings, engine and app are
       all built for testing.

Fixture Hierarchy:
    Function-scoped:
    ├── mock_db_session: Mock AsyncSession (service unit tests)
    ├── credentials:     Cheap argon2 CredentialManager
    ├── token_service:   TokenService with the test secret
    ├── database:        Fresh schema on the SQLite test database
    ├── test_client:     HTTPX AsyncClient bound to the app (needs database)
    └── register_user:   Registers + logs in a user through the API
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='socialnet_test_')}/test.db"
)
os.environ["JWT_SECRET"] = "test-secret-not-for-production-0123456789"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_PARALLELISM"] = "1"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Any, Dict  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from socialnet.config import settings  # noqa: E402
from socialnet.security.passwords import CredentialManager  # noqa: E402
from socialnet.security.tokens import TokenService  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_x(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = user
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def credentials() -> CredentialManager:
    """argon2id with minimal cost so hashing tests stay fast."""
    return CredentialManager(time_cost=1, memory_cost=1024, parallelism=1)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key=settings.jwt_secret)


@pytest_asyncio.fixture
async def database():
    """
    Creates every table before the test and drops them afterwards.

    The app's own engine is used so requests made through `test_client`
    see the same database.
    """
    import socialnet.models  # noqa: F401
    from socialnet.database import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient wired straight to the ASGI app (no server process).

    Usage:
        async def test_home(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from socialnet.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def register_user(test_client):
    """
    Returns a coroutine that registers and logs in a user.

    Usage:
        alice = await register_user("alice")
        headers = {"Authorization": alice["token"]}
    """

    async def _register(username: str, password: str = "pw1") -> Dict[str, Any]:
        email = f"{username}@example.com"
        response = await test_client.post(
            "/users/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        response = await test_client.post(
            "/users/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _register
