"""Tests for CLI commands."""

import json
from datetime import date
from unittest.mock import AsyncMock, patch

from httpx import Response
from typer.testing import CliRunner

from factories import make_event, make_repo, make_user
from github_insights.cli import app
from github_insights.models.contribution import ContributionPoint
from github_insights.models.insights import InsightsSnapshot
from github_insights.models.language import LanguageStat, LanguageSummary
from github_insights.models.repository import Repository
from github_insights.models.user import UserProfile

runner = CliRunner()


def make_snapshot(**overrides) -> InsightsSnapshot:
    data = {
        "username": "octocat",
        "sequence": 1,
        "profile": UserProfile.from_api(make_user()),
        "repositories": (Repository.from_api(make_repo(1, language="Go")),),
        "contributions": (
            ContributionPoint(day=date(2024, 1, 5), count=2),
            ContributionPoint(day=date(2024, 1, 7), count=1),
        ),
        "languages": LanguageSummary(
            ranked=(LanguageStat(language="Go", count=1),),
            capped=(LanguageStat(language="Go", count=1),),
        ),
    }
    data.update(overrides)
    return InsightsSnapshot(**data)


class TestCLI:
    """Tests for CLI commands."""

    def test_main_help(self):
        """Test main help output."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "show" in result.output

    def test_show_help(self):
        """Test show command help."""
        result = runner.invoke(app, ["show", "--help"])

        assert result.exit_code == 0
        assert "--json" in result.output
        assert "--fill-gaps" in result.output

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "github-insights version" in result.output

    def test_show_tables(self):
        """Test the dashboard rendering."""
        with patch("github_insights.cli._load", new=AsyncMock(return_value=make_snapshot())):
            result = runner.invoke(app, ["show", "octocat"])

        assert result.exit_code == 0
        assert "The Octocat" in result.output
        assert "repo-1" in result.output
        assert "2024-01-05" in result.output
        assert "2024-01-06" not in result.output

    def test_show_fill_gaps(self):
        """Test that --fill-gaps adds zero days."""
        with patch("github_insights.cli._load", new=AsyncMock(return_value=make_snapshot())):
            result = runner.invoke(app, ["show", "octocat", "--fill-gaps", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["contributions"] == [
            {"day": "2024-01-05", "count": 2},
            {"day": "2024-01-06", "count": 0},
            {"day": "2024-01-07", "count": 1},
        ]

    def test_show_json(self):
        """Test JSON output."""
        with patch("github_insights.cli._load", new=AsyncMock(return_value=make_snapshot())):
            result = runner.invoke(app, ["show", "octocat", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["username"] == "octocat"
        assert data["profile"]["username"] == "octocat"
        assert data["error"] is None

    def test_show_error_exit_code(self):
        """Test that a failed load exits with status 1."""
        snapshot = InsightsSnapshot(username="nobody", sequence=1, error="Resource not found")

        with patch("github_insights.cli._load", new=AsyncMock(return_value=snapshot)):
            result = runner.invoke(app, ["show", "nobody"])

        assert result.exit_code == 1
        assert "Resource not found" in result.output

    def test_show_error_json(self):
        """Test that JSON output carries the error field."""
        snapshot = InsightsSnapshot(username="nobody", sequence=1, error="Resource not found")

        with patch("github_insights.cli._load", new=AsyncMock(return_value=snapshot)):
            result = runner.invoke(app, ["show", "nobody", "--json"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error"] == "Resource not found"

    def test_blank_username(self, test_config):
        """Test that a blank username exits before any request."""
        result = runner.invoke(app, ["show", "   "])

        assert result.exit_code == 1
        assert "blank" in result.output

    def test_show_from_api(self, test_config, mock_github_api):
        """Test a full run against a mocked API."""
        mock_github_api.get("/users/octocat").mock(return_value=Response(200, json=make_user()))
        mock_github_api.get("/users/octocat/repos").mock(
            side_effect=lambda request: Response(
                200,
                json=[make_repo(1, "Go")] if request.url.params["page"] == "1" else [],
            )
        )
        mock_github_api.get("/users/octocat/events/public").mock(
            return_value=Response(200, json=[make_event("PushEvent", "2024-01-06T12:00:00Z")])
        )

        result = runner.invoke(app, ["show", "octocat", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["profile"]["name"] == "The Octocat"
        assert [r["id"] for r in data["repositories"]] == [1]
        assert data["languages"]["capped"] == [{"language": "Go", "count": 1}]
        assert sum(p["count"] for p in data["contributions"]) == 1
