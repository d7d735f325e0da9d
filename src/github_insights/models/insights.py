"""Consolidated dashboard snapshot."""

from pydantic import BaseModel, ConfigDict, Field

from github_insights.models.contribution import ContributionPoint, ContributionSummary
from github_insights.models.language import LanguageSummary
from github_insights.models.repository import Repository
from github_insights.models.user import UserProfile


class InsightsSnapshot(BaseModel):
    """Everything the dashboard shows, published atomically.

    A snapshot is never mutated; each load publishes a new one. Fields that a
    failed load did not reach keep the values of the previous snapshot.
    """

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    sequence: int = 0  # Submission order of the load that produced it
    profile: UserProfile | None = None
    repositories: tuple[Repository, ...] = ()
    repositories_truncated: bool = False  # An error status cut pagination short
    contributions: tuple[ContributionPoint, ...] = ()
    languages: LanguageSummary = Field(default_factory=LanguageSummary)
    error: str | None = None

    @property
    def contribution_summary(self) -> ContributionSummary:
        return ContributionSummary.from_points(self.contributions)
