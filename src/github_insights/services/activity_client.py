"""Recent activity client."""

import logging
from typing import Any

from github_insights.exceptions import DecodeError
from github_insights.models.activity import EventKind, RawEvent
from github_insights.models.contribution import ContributionPoint
from github_insights.services.contribution_aggregator import ContributionAggregator
from github_insights.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


class ActivityClient:
    """Turns a user's recent public events into a contribution histogram.

    Only one page of events is read. The feed is a stand-in for the real
    contribution calendar: it covers recent activity, not full history.
    """

    def __init__(
        self,
        rest_client: GitHubRestClient,
        aggregator: ContributionAggregator | None = None,
        per_page: int = 100,
    ):
        self.rest_client = rest_client
        self.aggregator = aggregator or ContributionAggregator()
        self.per_page = per_page

    async def fetch_events(self, username: str) -> list[RawEvent]:
        """Fetch the most recent public events.

        Raises:
            TransportError: If the request failed
            DecodeError: If the payload is not a list of events
        """
        logger.debug("Fetching public events for %s", username)

        data: Any = await self.rest_client.get_user_events(username, per_page=self.per_page)
        if not isinstance(data, list):
            raise DecodeError("Expected a JSON list of events", payload=data)

        events = [RawEvent.from_api(item) for item in data]
        logger.debug("Found %d events", len(events))
        return events

    async def fetch(self, username: str) -> list[ContributionPoint]:
        """Fetch recent events and aggregate push events per day."""
        events = await self.fetch_events(username)
        pushes = [event for event in events if event.kind is EventKind.PUSH]

        logger.debug("%d of %d events are pushes", len(pushes), len(events))
        return self.aggregator.aggregate_events(pushes)
