"""Services for GitHub data collection and aggregation."""

from github_insights.services.activity_client import ActivityClient
from github_insights.services.contribution_aggregator import ContributionAggregator, fill_gaps
from github_insights.services.github_rest_client import GitHubRestClient
from github_insights.services.language_aggregator import LanguageAggregator
from github_insights.services.profile_client import ProfileClient
from github_insights.services.repository_client import RepositoryClient
from github_insights.services.resource_fetcher import PagedResult, ResourceFetcher

__all__ = [
    "GitHubRestClient",
    "ResourceFetcher",
    "PagedResult",
    "ProfileClient",
    "RepositoryClient",
    "ActivityClient",
    "ContributionAggregator",
    "LanguageAggregator",
    "fill_gaps",
]
