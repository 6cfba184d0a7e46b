"""
Security test fixtures.

These fixtures enable testing ownership scoping by signing up two users
through the API, each with its own authenticated client.
"""
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from tests.conftest import signup_and_get_token


@pytest.fixture
async def client_as_user_a(auth_client: AsyncClient) -> AsyncClient:
    """Client authenticated as User A (the default signed-up test user)."""
    return auth_client


@pytest.fixture
async def client_as_user_b(client: AsyncClient) -> AsyncGenerator[AsyncClient]:
    """
    Client authenticated as a second user (User B).

    Shares the app and session override installed by the `client` fixture.
    """
    from api.main import app

    token = await signup_and_get_token(client, email="user-b@email.com", password="user-b-pass")
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Authorization": f"Bearer {token}"},
    ) as user_b_client:
        yield user_b_client


@pytest.fixture
async def user_a_bookmark(client_as_user_a: AsyncClient) -> dict:
    """Create a bookmark belonging to User A."""
    response = await client_as_user_a.post(
        "/bookmarks",
        json={
            "title": "User A's Private Bookmark",
            "description": "This should only be accessible to User A",
            "link": "https://user-a-bookmark.example.com/",
        },
    )
    assert response.status_code == 201
    return response.json()
