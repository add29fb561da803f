import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_successful_login(client: AsyncClient):
    """Login returns a bearer token valid for the configured TTL"""
    await client.post("/user", json={"email": "user@example.com", "password": "SecurePass123!"})

    response = await client.post(
        "/user/login", json={"email": "User@Example.com", "password": "SecurePass123!"}
    )

    assert response.status_code == 200
    data = response.json()
    assert isinstance(data["access_token"], str)
    assert len(data["access_token"]) > 0
    assert data["token_type"] == "bearer"
    assert data["expires_in"] == 24 * 60 * 60


@pytest.mark.asyncio
async def test_login_invalid_credentials(client: AsyncClient):
    await client.post("/user", json={"email": "user@example.com", "password": "SecurePass123!"})

    response = await client.post(
        "/user/login", json={"email": "user@example.com", "password": "WrongPassword!"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_nonexistent_user(client: AsyncClient):
    """Same error as a wrong password, so emails cannot be enumerated"""
    response = await client.post(
        "/user/login", json={"email": "nobody@example.com", "password": "SomePassword123!"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_missing_fields(client: AsyncClient):
    response = await client.post("/user/login", json={"email": "user@example.com"})

    assert response.status_code == 400
    assert [e["field"] for e in response.json()["errors"]] == ["password"]
