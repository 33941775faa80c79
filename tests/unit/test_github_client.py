"""Unit tests for the GitHub repository listing client."""

import httpx
import pytest

from core.exceptions import GithubProfileNotFoundError
from infrastructure.github.client import GithubClient

REPOS = [{"name": "octo-one", "html_url": "https://github.com/octo/octo-one"}]


def _client(handler, **kwargs) -> GithubClient:
    return GithubClient(
        base_url="https://api.github.test/",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestListRepos:
    async def test_forwards_repos(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=REPOS)

        result = await _client(handler).list_repos("octo")

        assert result == REPOS
        request = seen[0]
        assert request.url.path == "/users/octo/repos"
        assert request.url.params["per_page"] == "5"
        assert request.url.params["sort"] == "created:asc"
        assert "user-agent" in request.headers
        assert "authorization" not in request.headers

    async def test_sends_app_credentials_when_configured(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        await _client(handler, client_id="id", client_secret="secret").list_repos("octo")

        assert seen[0].headers["authorization"].startswith("Basic ")

    async def test_non_200_is_missing_account(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Not Found"})

        with pytest.raises(GithubProfileNotFoundError) as exc_info:
            await _client(handler).list_repos("ghost")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "No github account for this username"

    async def test_transport_failure_is_missing_account(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(GithubProfileNotFoundError):
            await _client(handler).list_repos("octo")
