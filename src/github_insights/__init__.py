"""GitHub Insights - chart-ready dashboard data from the public GitHub API.

This package turns a user's public profile, repositories and recent events
into immutable view models:
- User profile summary
- Full repository list (all pages)
- Daily contribution histogram from recent push events
- Language distribution with a long-tail "Other" rollup

Example usage:
    ```python
    from github_insights import InsightsCoordinator

    async with InsightsCoordinator() as coordinator:
        snapshot = await coordinator.load("octocat")
        print(snapshot.profile.display_name, len(snapshot.repositories))
    ```
"""

from importlib import metadata as _metadata

from github_insights.config import Config
from github_insights.coordinator import InsightsCoordinator
from github_insights.exceptions import (
    DecodeError,
    GitHubInsightsError,
    NotFoundError,
    TransportError,
)
from github_insights.models import (
    ContributionPoint,
    ContributionSummary,
    EventKind,
    InsightsSnapshot,
    LanguageStat,
    LanguageSummary,
    RawEvent,
    Repository,
    UserProfile,
)

try:
    __version__ = _metadata.version("github-insights")
except _metadata.PackageNotFoundError:
    __version__ = "0.0.0.dev0"

__all__ = [
    # Entry point
    "InsightsCoordinator",
    # Configuration
    "Config",
    # Exceptions
    "GitHubInsightsError",
    "TransportError",
    "NotFoundError",
    "DecodeError",
    # Models
    "UserProfile",
    "Repository",
    "RawEvent",
    "EventKind",
    "ContributionPoint",
    "ContributionSummary",
    "LanguageStat",
    "LanguageSummary",
    "InsightsSnapshot",
]
