"""Integration tests for login and the token guard."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from infrastructure.auth.jwt_provider import JWTAuthProvider


class TestLoginAPI:
    @pytest.mark.asyncio
    async def test_login_with_valid_credentials(self, client: AsyncClient, alice):
        response = await client.post(
            "/api/auth", json={"email": "alice@example.com", "password": "secret123"}
        )

        assert response.status_code == 200
        assert response.json()["token"]

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, client: AsyncClient, alice):
        response = await client.post(
            "/api/auth", json={"email": "alice@example.com", "password": "wrong-one"}
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "Invalid Credentials"}]}

    @pytest.mark.asyncio
    async def test_login_with_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/auth", json={"email": "ghost@example.com", "password": "secret123"}
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "Invalid Credentials"}]}


class TestCurrentUserAPI:
    @pytest.mark.asyncio
    async def test_returns_user_without_password(self, client: AsyncClient, alice):
        response = await client.get("/api/auth", headers=alice.headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(alice.id)
        assert data["name"] == "Alice"
        assert data["email"] == "alice@example.com"
        assert data["avatar"].startswith("https://www.gravatar.com/avatar/")
        assert "password" not in data
        assert "password_hash" not in data

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(
        self, client: AsyncClient, auth_provider: JWTAuthProvider
    ):
        token = auth_provider.issue(uuid4())

        response = await client.get("/api/auth", headers={"x-auth-token": token})

        assert response.status_code == 401
        assert response.json() == {"msg": "Token is not valid"}


class TestAuthGuard:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("GET", "/api/auth"),
            ("GET", "/api/posts"),
            ("POST", "/api/posts"),
            ("PUT", "/api/posts/like/not-an-id"),
            ("DELETE", "/api/posts/not-an-id"),
            ("GET", "/api/profile/me"),
            ("PUT", "/api/profile/experience"),
            ("DELETE", "/api/profile"),
        ],
    )
    async def test_missing_token_rejected_first(
        self, client: AsyncClient, method: str, path: str
    ):
        # Body is invalid and ids are malformed; the missing token wins
        response = await client.request(method, path, json={})

        assert response.status_code == 401
        assert response.json() == {"msg": "No token,auth denied"}

    @pytest.mark.asyncio
    async def test_garbage_token(self, client: AsyncClient):
        response = await client.get("/api/posts", headers={"x-auth-token": "garbage"})

        assert response.status_code == 401
        assert response.json() == {"msg": "Token is not valid"}

    @pytest.mark.asyncio
    async def test_expired_token(self, client: AsyncClient, alice):
        expired = JWTAuthProvider(
            secret_key="test-secret-key", algorithm="HS256", expire_minutes=-1
        ).issue(alice.id)

        response = await client.get("/api/posts", headers={"x-auth-token": expired})

        assert response.status_code == 401
        assert response.json() == {"msg": "Token is not valid"}

    @pytest.mark.asyncio
    async def test_bearer_header_is_not_accepted(self, client: AsyncClient, alice):
        response = await client.get(
            "/api/posts", headers={"Authorization": f"Bearer {alice.token}"}
        )

        assert response.status_code == 401
        assert response.json() == {"msg": "No token,auth denied"}
