"""GitHub Insights coordinator - one call to load a user's dashboard."""

import logging
from collections.abc import Callable
from typing import Any

from github_insights.config import Config, get_config
from github_insights.exceptions import GitHubInsightsError
from github_insights.models.insights import InsightsSnapshot
from github_insights.services.activity_client import ActivityClient
from github_insights.services.github_rest_client import GitHubRestClient
from github_insights.services.language_aggregator import LanguageAggregator
from github_insights.services.profile_client import ProfileClient
from github_insights.services.repository_client import RepositoryClient

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[InsightsSnapshot], None]


class InsightsCoordinator:
    """Loads profile, repositories and activity into one published snapshot.

    Example usage:
        ```python
        from github_insights import InsightsCoordinator

        async with InsightsCoordinator() as coordinator:
            snapshot = await coordinator.load("octocat")
            for stat in snapshot.languages.capped:
                print(stat.display_label, stat.count)
        ```

    Loads may overlap. Each one takes a sequence number when it starts, and
    a finished load is published only if no later-started load has already
    been published, so the most recently requested user always wins.

    Args:
        rest_client: Transport shared by the default clients. When omitted,
            one is created from ``config`` and closed by ``close()``.
        config: Configuration (defaults to the environment)
        profile_client, repository_client, activity_client: Override the
            clients built on ``rest_client``
        language_aggregator: Override the default ranking/capping
    """

    def __init__(
        self,
        rest_client: GitHubRestClient | None = None,
        *,
        config: Config | None = None,
        profile_client: ProfileClient | None = None,
        repository_client: RepositoryClient | None = None,
        activity_client: ActivityClient | None = None,
        language_aggregator: LanguageAggregator | None = None,
    ):
        if config is None:
            config = rest_client.config if rest_client is not None else get_config()
        self._config = config
        self._owns_rest_client = rest_client is None
        self._rest_client = rest_client or GitHubRestClient(config=config)

        self.profile_client = profile_client or ProfileClient(self._rest_client)
        self.repository_client = repository_client or RepositoryClient(
            self._rest_client, per_page=config.per_page
        )
        self.activity_client = activity_client or ActivityClient(
            self._rest_client, per_page=config.events_per_page
        )
        self.language_aggregator = language_aggregator or LanguageAggregator(
            limit=config.language_limit
        )

        self._snapshot = InsightsSnapshot()
        self._listeners: list[SnapshotListener] = []
        self._submitted = 0
        self._published = 0
        self._in_flight = 0

    async def __aenter__(self) -> "InsightsCoordinator":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP connection if this coordinator created it."""
        if self._owns_rest_client:
            await self._rest_client.close()
        logger.debug("InsightsCoordinator closed")

    @property
    def snapshot(self) -> InsightsSnapshot:
        """The most recently published snapshot."""
        return self._snapshot

    @property
    def is_loading(self) -> bool:
        """True while at least one load is in flight."""
        return self._in_flight > 0

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Call ``listener`` with every published snapshot.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def load(self, username: str) -> InsightsSnapshot:
        """Load everything the dashboard shows for ``username``.

        Profile, repositories and activity are fetched in that order. The
        first failure stops the load and is recorded as ``snapshot.error``;
        whatever was fetched before it still replaces the previous values.

        Args:
            username: GitHub username (surrounding whitespace is ignored)

        Returns:
            The snapshot this load produced, whether or not it was published

        Raises:
            ValueError: If ``username`` is blank
        """
        username = username.strip()
        if not username:
            raise ValueError("Username must not be blank")

        self._submitted += 1
        sequence = self._submitted
        self._in_flight += 1
        logger.info("Loading insights for %s (load #%d)", username, sequence)

        updates: dict[str, Any] = {"username": username, "sequence": sequence, "error": None}
        try:
            updates["profile"] = await self.profile_client.fetch(username)

            paged = await self.repository_client.fetch_paged(username)
            updates["repositories"] = paged.items
            updates["repositories_truncated"] = paged.possibly_truncated
            updates["languages"] = self.language_aggregator.summarize(paged.items)

            updates["contributions"] = tuple(await self.activity_client.fetch(username))
        except GitHubInsightsError as e:
            logger.warning("Loading insights for %s failed: %s", username, e)
            updates["error"] = str(e) or type(e).__name__
        finally:
            self._in_flight -= 1

        snapshot = self._snapshot.model_copy(update=updates)
        self._publish(snapshot)
        return snapshot

    def _publish(self, snapshot: InsightsSnapshot) -> None:
        if snapshot.sequence <= self._published:
            logger.debug(
                "Discarding load #%d for %s; load #%d already published",
                snapshot.sequence,
                snapshot.username,
                self._published,
            )
            return

        self._snapshot = snapshot
        self._published = snapshot.sequence
        logger.info("Published insights for %s (load #%d)", snapshot.username, snapshot.sequence)

        for listener in list(self._listeners):
            listener(snapshot)
