"""Data models for GitHub Insights."""

from github_insights.models.activity import EventKind, RawEvent
from github_insights.models.contribution import ContributionPoint, ContributionSummary
from github_insights.models.insights import InsightsSnapshot
from github_insights.models.language import (
    OTHER_LANGUAGE,
    UNKNOWN_LANGUAGE,
    LanguageStat,
    LanguageSummary,
)
from github_insights.models.repository import Repository
from github_insights.models.user import UserProfile

__all__ = [
    "UserProfile",
    "Repository",
    "RawEvent",
    "EventKind",
    "ContributionPoint",
    "ContributionSummary",
    "LanguageStat",
    "LanguageSummary",
    "UNKNOWN_LANGUAGE",
    "OTHER_LANGUAGE",
    "InsightsSnapshot",
]
