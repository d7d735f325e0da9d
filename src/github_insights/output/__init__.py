"""Output handlers for GitHub Insights."""

from github_insights.output.console import Console

__all__ = [
    "Console",
]
