"""User profile client."""

import logging

from github_insights.models.user import UserProfile
from github_insights.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


class ProfileClient:
    """Fetches a single user summary."""

    def __init__(self, rest_client: GitHubRestClient):
        self.rest_client = rest_client

    async def fetch(self, username: str) -> UserProfile:
        """Fetch a user's profile.

        Args:
            username: GitHub username

        Returns:
            UserProfile snapshot

        Raises:
            TransportError: If the request failed (NotFoundError for unknown users)
            DecodeError: If the payload is not a user record
        """
        logger.debug("Fetching profile for %s", username)

        data = await self.rest_client.get_user(username)
        return UserProfile.from_api(data)
