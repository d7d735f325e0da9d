"""Repository list client."""

import logging

from github_insights.models.repository import Repository
from github_insights.services.github_rest_client import GitHubRestClient
from github_insights.services.resource_fetcher import PagedResult, ResourceFetcher
from github_insights.utils.pagination import page_url_builder

logger = logging.getLogger(__name__)


class RepositoryClient:
    """Collects a user's full public repository list."""

    def __init__(self, rest_client: GitHubRestClient, per_page: int = 100):
        self.rest_client = rest_client
        self.fetcher = ResourceFetcher(rest_client, per_page=per_page)

    async def fetch_paged(self, username: str) -> PagedResult[Repository]:
        """Fetch every repository page, keeping pagination diagnostics."""
        logger.debug("Fetching repositories for %s", username)

        result = await self.fetcher.fetch_all(
            page_url_builder(self.rest_client.user_repos_path(username)),
            Repository.from_api,
        )

        logger.debug(
            "Found %d repositories in %d requests", len(result.items), result.pages_requested
        )
        return result

    async def fetch(self, username: str) -> list[Repository]:
        """Fetch a user's repositories in API page order.

        A page answered with an error status truncates the list silently.
        """
        result = await self.fetch_paged(username)
        return list(result.items)
