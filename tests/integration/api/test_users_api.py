"""Integration tests for registration."""

import pytest
from httpx import AsyncClient

from infrastructure.auth.jwt_provider import JWTAuthProvider


class TestRegisterAPI:
    @pytest.mark.asyncio
    async def test_register_returns_token(
        self, client: AsyncClient, auth_provider: JWTAuthProvider
    ):
        response = await client.post(
            "/api/users",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret123"},
        )

        assert response.status_code == 200
        claim = auth_provider.verify(response.json()["token"])
        assert claim.user_id is not None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client: AsyncClient, register):
        await register(email="dup@example.com")

        response = await client.post(
            "/api/users",
            json={"name": "Other", "email": "dup@example.com", "password": "secret123"},
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "user already exists"}]}

    @pytest.mark.asyncio
    async def test_short_password(self, client: AsyncClient):
        response = await client.post(
            "/api/users",
            json={"name": "Ada", "email": "ada@example.com", "password": "123"},
        )

        assert response.status_code == 400
        params = [error["param"] for error in response.json()["errors"]]
        assert params == ["password"]

    @pytest.mark.asyncio
    async def test_invalid_email_and_blank_name(self, client: AsyncClient):
        response = await client.post(
            "/api/users",
            json={"name": "   ", "email": "not-an-email", "password": "secret123"},
        )

        assert response.status_code == 400
        params = {error["param"] for error in response.json()["errors"]}
        assert params == {"name", "email"}
