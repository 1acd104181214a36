"""Pytest configuration and shared fixtures for API tests."""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

# Set test DB before app imports so config/engine use it.
# SQLite file by default; export DATABASE_URL to run against PostgreSQL instead.
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="fittrack-tests-"), "test.db"),
)
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("IDP_SECRET", "test-idp-secret")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "10000/minute")
os.environ.setdefault("ENABLE_SCHEDULER", "false")

from fittrack.core.auth import create_access_token
from fittrack.db.base import Base
from fittrack.db.session import async_session_maker, engine, init_db
from fittrack.db.storage import DatabaseStorage
from fittrack.main import app

TEST_USER_ID = "11111111-1111-4111-8111-111111111111"
OTHER_USER_ID = "22222222-2222-4222-8222-222222222222"


async def _clear_all():
    """Delete all rows in reverse dependency order so tests start clean."""
    async with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(text(f"DELETE FROM {table.name}"))


@pytest_asyncio.fixture
async def clean_db():
    """Create tables (idempotent) and empty them; dispose pooled connections afterwards."""
    await init_db()
    await _clear_all()
    yield
    await engine.dispose()


@pytest_asyncio.fixture
async def client(clean_db):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def storage(clean_db):
    """DatabaseStorage on its own session, for tests that seed or inspect rows directly."""
    async with async_session_maker() as session:
        yield DatabaseStorage(session)


@pytest_asyncio.fixture
async def test_user(clean_db):
    """Sync a user the way the identity callback does and return (user_id, email, access_token)."""
    async with async_session_maker() as session:
        user = await DatabaseStorage(session).upsert_user(
            {"id": TEST_USER_ID, "email": "test@test.com", "first_name": "Test", "last_name": "User"}
        )
        token = create_access_token(user.id, user.email)
        return user.id, user.email, token


@pytest_asyncio.fixture
async def other_user(clean_db):
    async with async_session_maker() as session:
        user = await DatabaseStorage(session).upsert_user({"id": OTHER_USER_ID, "email": "other@test.com"})
        token = create_access_token(user.id, user.email)
        return user.id, user.email, token


@pytest.fixture
def auth_headers(test_user):
    """Return dict of Authorization header for test_user."""
    _, __, token = test_user
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers(other_user):
    _, __, token = other_user
    return {"Authorization": f"Bearer {token}"}
