"""
Pytest fixtures and configuration
"""
import os
import sys
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

# Cheap hashes and a throwaway secret for the test run
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Add backend to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cardbox.main import app
from cardbox.database import Base, get_db
from cardbox import models  # noqa: F401


@pytest_asyncio.fixture(scope="function")
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    """Create a per-test database and return its session factory"""
    # File-based SQLite so concurrent requests get their own connections.
    db_file = tmp_path / "test.db"
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_file.as_posix()}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A single session for store-level tests"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with test database"""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def register_and_login(client: AsyncClient, username: str, password: str) -> dict:
    """Register a user, log in, return {"token", "user", "headers"}"""
    response = await client.post("/api/register", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    response = await client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    data = response.json()
    data["headers"] = {"Authorization": f"Bearer {data['token']}"}
    return data


@pytest_asyncio.fixture(scope="function")
async def alice(client: AsyncClient) -> dict:
    return await register_and_login(client, "alice", "pw1")


@pytest_asyncio.fixture(scope="function")
async def bob(client: AsyncClient) -> dict:
    return await register_and_login(client, "bob", "pw-bob")


@pytest.fixture
def card_payload() -> dict:
    """A typical card body"""
    return {
        "title": "Grocery",
        "category": "note",
        "content": "milk",
        "tags": ["home"],
    }
