"""GitHub REST API client."""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from github_insights.config import Config, get_config
from github_insights.exceptions import DecodeError, NotFoundError, TransportError

logger = logging.getLogger(__name__)


class GitHubRestClient:
    """Async client for GitHub REST API.

    Requests are made once: there is no retry or backoff at this layer.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": self.config.user_agent,
        }
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def send(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        """Make a GET request and return the response whatever its status.

        Raises:
            TransportError: If the request could not complete
        """
        client = await self._get_client()
        logger.debug("GET %s params=%s", endpoint, params)

        try:
            response = await client.get(endpoint, params=params)
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {endpoint}: {e}") from e

        logger.debug("GET %s -> %d", endpoint, response.status_code)
        return response

    @staticmethod
    def decode_json(response: httpx.Response) -> Any:
        """Decode a JSON response body.

        Raises:
            DecodeError: If the body is not valid JSON
        """
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"Invalid JSON in response from {response.request.url.path}",
                payload=response.text,
            ) from e

    @staticmethod
    def raise_for_status(response: httpx.Response, endpoint: str) -> None:
        """Raise TransportError (or NotFoundError) for non-2xx responses."""
        if response.is_success:
            return

        try:
            body = response.json() if response.content else None
        except ValueError:
            body = None
        message = body.get("message", "Unknown error") if isinstance(body, dict) else "Unknown error"

        if response.status_code == 404:
            raise NotFoundError(
                f"Resource not found: {endpoint}",
                response_body=body,
            )
        elif response.status_code >= 500:
            raise TransportError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
                response_body=body,
            )
        raise TransportError(
            f"API error ({response.status_code}): {message}",
            status_code=response.status_code,
            response_body=body,
        )

    async def get_json(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Make a GET request and return the decoded JSON body."""
        response = await self.send(endpoint, params=params)
        self.raise_for_status(response, endpoint)
        return self.decode_json(response)

    # Endpoints

    @staticmethod
    def user_path(username: str) -> str:
        return f"/users/{quote(username, safe='')}"

    async def get_user(self, username: str) -> Any:
        """Get user profile data."""
        return await self.get_json(self.user_path(username))

    def user_repos_path(self, username: str) -> str:
        """Path of the paginated repository list."""
        return f"{self.user_path(username)}/repos"

    async def get_user_events(self, username: str, per_page: int = 100) -> Any:
        """Get the most recent page of a user's public events."""
        return await self.get_json(
            f"{self.user_path(username)}/events/public",
            params={"per_page": per_page},
        )
