"""Outbound GitHub repository listing."""

import logging
from typing import Any

import httpx

from core.config import settings
from core.exceptions import GithubProfileNotFoundError

logger = logging.getLogger(__name__)


class GithubClient:
    """Forwards a user's latest repositories from the GitHub REST API."""

    def __init__(
        self,
        base_url: str = settings.github_api_url,
        client_id: str = settings.github_client_id,
        client_secret: str = settings.github_client_secret,
        timeout: float = settings.github_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = (client_id, client_secret) if client_id and client_secret else None
        self._timeout = timeout
        self._transport = transport

    async def list_repos(self, username: str) -> Any:
        """Return the five most recently created repos for ``username``.

        Any transport failure or non-200 answer is reported as a missing account.
        """
        url = f"{self._base_url}/users/{username}/repos"
        params = {"per_page": 5, "sort": "created:asc"}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                headers={"user-agent": settings.app_name},
            ) as client:
                response = await client.get(url, params=params, auth=self._auth)
        except httpx.HTTPError:
            logger.exception("GitHub request failed for %s", username)
            raise GithubProfileNotFoundError(username) from None

        if response.status_code != 200:
            logger.info("GitHub returned %d for %s", response.status_code, username)
            raise GithubProfileNotFoundError(username)

        return response.json()
