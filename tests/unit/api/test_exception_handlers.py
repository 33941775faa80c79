"""Unit tests for exception handlers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.exception_handlers import setup_exception_handlers
from core.exceptions import (
    ConcurrentUpdateError,
    MalformedIdError,
    PostNotFoundError,
    StoreFailureError,
    UserAlreadyExistsError,
)


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


async def _get(app: FastAPI, path: str):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_app_exception_returns_message_only(self) -> None:
        app = _create_test_app()

        @app.get("/raise-app")
        async def _() -> None:
            raise PostNotFoundError("some-id")

        response = await _get(app, "/raise-app")

        assert response.status_code == 404
        assert response.json() == {"msg": "Post not found"}

    @pytest.mark.asyncio
    async def test_malformed_id_indistinguishable_from_not_found(self) -> None:
        app = _create_test_app()

        @app.get("/missing")
        async def _missing() -> None:
            raise PostNotFoundError("0b8a4c1e-0000-0000-0000-000000000000")

        @app.get("/malformed")
        async def _malformed() -> None:
            raise MalformedIdError(PostNotFoundError("123"), "123")

        missing = await _get(app, "/missing")
        malformed = await _get(app, "/malformed")

        assert missing.status_code == malformed.status_code == 404
        assert missing.json() == malformed.json()

    @pytest.mark.asyncio
    async def test_errors_list_format(self) -> None:
        app = _create_test_app()

        @app.get("/raise-dup")
        async def _() -> None:
            raise UserAlreadyExistsError("ada@example.com")

        response = await _get(app, "/raise-dup")

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "user already exists"}]}

    @pytest.mark.asyncio
    async def test_store_failure_is_generic_500(self) -> None:
        app = _create_test_app()

        @app.get("/raise-store")
        async def _() -> None:
            raise StoreFailureError("OperationalError")

        response = await _get(app, "/raise-store")

        assert response.status_code == 500
        assert response.json() == {"msg": "Server error"}

    @pytest.mark.asyncio
    async def test_concurrent_update_is_409(self) -> None:
        app = _create_test_app()

        @app.get("/raise-conflict")
        async def _() -> None:
            raise ConcurrentUpdateError()

        response = await _get(app, "/raise-conflict")

        assert response.status_code == 409
        assert "msg" in response.json()

    @pytest.mark.asyncio
    async def test_http_exception_returns_msg(self) -> None:
        from starlette.exceptions import HTTPException

        app = _create_test_app()

        @app.get("/raise-http")
        async def _() -> None:
            raise HTTPException(status_code=405, detail="Method Not Allowed")

        response = await _get(app, "/raise-http")

        assert response.status_code == 405
        assert response.json() == {"msg": "Method Not Allowed"}

    @pytest.mark.asyncio
    async def test_unknown_route_returns_msg(self) -> None:
        app = _create_test_app()

        response = await _get(app, "/nowhere")

        assert response.status_code == 404
        assert response.json() == {"msg": "Not Found"}

    @pytest.mark.asyncio
    async def test_validation_error_returns_400_with_field_details(self) -> None:
        from pydantic import BaseModel, Field

        app = _create_test_app()

        class Body(BaseModel):
            text: str = Field(..., min_length=1)

        @app.post("/validate")
        async def _(body: Body) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/validate", json={"text": ""})

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert len(errors) == 1
        assert errors[0]["param"] == "text"
        assert errors[0]["location"] == "body"
        assert errors[0]["msg"]

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_500(self) -> None:
        app = _create_test_app()

        # Build a fake request with request.state.request_id
        mock_request = MagicMock()
        mock_request.state.request_id = "test-req-id"

        exc = RuntimeError("Something went wrong")

        # Get the registered handler by looking up the app's handlers
        handler = None
        for exc_class, h in app.exception_handlers.items():
            if exc_class is Exception:
                handler = h
                break

        assert handler is not None, "Global exception handler not registered"

        response = await handler(mock_request, exc)  # type: ignore[misc]

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body == {"msg": "Server error"}
