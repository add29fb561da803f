"""Every token failure looks the same to the client: 401 INVALID_TOKEN"""

import pytest
from httpx import AsyncClient

from config import ApplicationConfig
from src.app.services.token_service import TokenService


def _tamper(token: str) -> str:
    header, payload, signature = token.split(".")
    replacement = "A" if signature[0] != "A" else "B"
    return ".".join([header, payload, replacement + signature[1:]])


async def _attempt_post(client: AsyncClient, token: str):
    return await client.post(
        "/post",
        json={"title": "Hello", "content": "World"},
        headers={"Authorization": f"Bearer {token}"},
    )


@pytest.mark.asyncio
async def test_missing_authorization_header(client: AsyncClient):
    response = await client.post("/post", json={"title": "Hello", "content": "World"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_non_bearer_scheme(client: AsyncClient):
    response = await client.post(
        "/post",
        json={"title": "Hello", "content": "World"},
        headers={"Authorization": "Basic dXNlcjpwYXNz"},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_malformed_expired_and_tampered_tokens_are_indistinguishable(
    client: AsyncClient, register
):
    user_id, headers = await register()
    valid = headers["Authorization"].split(" ", 1)[1]
    expired = TokenService(secret=ApplicationConfig.JWT_SECRET, ttl=0).issue(user_id)
    foreign = TokenService(secret="some-other-secret").issue(user_id)

    bodies = []
    for token in ["garbage", expired, _tamper(valid), foreign]:
        response = await _attempt_post(client, token)
        assert response.status_code == 401
        bodies.append(response.json())

    assert all(body == bodies[0] for body in bodies)
    assert bodies[0]["error"]["code"] == "INVALID_TOKEN"

    # Nothing was written
    assert (await client.get("/post")).json() == []


@pytest.mark.asyncio
async def test_valid_token_is_accepted(client: AsyncClient, register):
    _, headers = await register()

    response = await client.post(
        "/post", json={"title": "Hello", "content": "World"}, headers=headers
    )

    assert response.status_code == 200
