"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator
from pathlib import Path

# Must be set before any app imports that trigger Settings validation.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-jwt-secret-with-at-least-thirty-two-bytes"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import Settings  # noqa: E402
from models.base import Base  # noqa: E402


TEST_EMAIL = "test@email.com"
TEST_PASSWORD = "test123"


@pytest.fixture
def settings() -> Settings:
    """Settings matching the environment configured above, without reading .env."""
    return Settings(
        _env_file=None,
        database_url=os.environ["DATABASE_URL"],
        JWT_SECRET=os.environ["JWT_SECRET"],
    )


@pytest.fixture
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """
    Create an engine on a fresh SQLite file for each test.

    A file (rather than :memory:) lets the request sessions and the
    assertion session use separate connections that see each other's commits.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the per-test engine."""
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """Session for arranging data and asserting on database state."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """
    Create an unauthenticated test client with database session override.

    The override mirrors get_async_session: one session per request,
    committed at the end, rolled back on error.
    """
    from api.main import app
    from db.session import get_async_session

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = override_get_async_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


async def signup_and_get_token(
    client: AsyncClient,
    email: str = TEST_EMAIL,
    password: str = TEST_PASSWORD,
) -> str:
    """Register a user through the API and return its access token."""
    response = await client.post("/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()["access_token"]


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Authorization header for a freshly signed-up user."""
    token = await signup_and_get_token(client)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def auth_client(
    client: AsyncClient,
    auth_headers: dict[str, str],
) -> AsyncClient:
    """Test client that sends the signed-up user's bearer token on every request."""
    client.headers.update(auth_headers)
    return client
