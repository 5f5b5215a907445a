import jwt
import pytest

from api.dependencies import create_access_token
from config.settings import settings


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_missing_token_is_401(client):
    response = await client.get("/api/v1/athletes/me")

    assert response.status_code == 401
    assert response.json()["detail"] == "No token, authorization denied"


@pytest.mark.asyncio
async def test_valid_token_resolves_user(client):
    response = await client.get("/api/v1/athletes/me", headers=_bearer(create_access_token("user-1")))

    assert response.status_code == 200
    assert response.json()["user_id"] == "user-1"


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_is_401(client):
    token = jwt.encode({"user_id": "user-1"}, "not-the-secret", algorithm=settings.jwt_algorithm)

    response = await client.get("/api/v1/athletes/me", headers=_bearer(token))

    assert response.status_code == 401
    assert response.json()["detail"] == "Token is not valid"


@pytest.mark.asyncio
async def test_token_for_unknown_user_is_401(client):
    response = await client.get("/api/v1/athletes/me", headers=_bearer(create_access_token("ghost")))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_deactivated_user_is_401(client, repository):
    repository.users["user-1"].is_active = False

    response = await client.get("/api/v1/athletes/me", headers=_bearer(create_access_token("user-1")))

    assert response.status_code == 401
    assert response.json()["detail"] == "Account is deactivated"


@pytest.mark.asyncio
async def test_health_is_public(client):
    response = await client.get("/health")

    assert response.json()["status"] == "healthy"
