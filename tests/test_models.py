"""Tests for data models."""

from datetime import date

import pytest
from pydantic import ValidationError

from factories import make_event, make_repo, make_user
from github_insights.exceptions import DecodeError
from github_insights.models.activity import EventKind, RawEvent
from github_insights.models.contribution import ContributionPoint, ContributionSummary
from github_insights.models.insights import InsightsSnapshot
from github_insights.models.language import LanguageStat, LanguageSummary
from github_insights.models.repository import Repository
from github_insights.models.user import UserProfile


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_from_api(self):
        """Test creating UserProfile from API response."""
        profile = UserProfile.from_api(make_user(bio="Mascot", company="GitHub"))

        assert profile.username == "octocat"
        assert profile.name == "The Octocat"
        assert profile.bio == "Mascot"
        assert profile.public_repos == 8
        assert profile.followers == 100
        assert profile.following == 9

    def test_optional_fields_may_be_missing(self):
        """Test that name and bio are optional."""
        data = make_user()
        del data["name"]
        del data["bio"]

        profile = UserProfile.from_api(data)

        assert profile.name is None
        assert profile.bio is None

    def test_display_name(self):
        """Test display name falls back to the login."""
        assert UserProfile.from_api(make_user()).display_name == "The Octocat"
        assert UserProfile.from_api(make_user(name=None)).display_name == "octocat"

    @pytest.mark.parametrize("missing", ["login", "avatar_url", "public_repos", "followers"])
    def test_missing_required_field(self, missing):
        """Test that a missing required field raises DecodeError."""
        data = make_user()
        del data[missing]

        with pytest.raises(DecodeError) as exc_info:
            UserProfile.from_api(data)

        assert missing in str(exc_info.value)
        assert exc_info.value.payload == data

    def test_error_document_is_not_a_profile(self):
        """Test that a GitHub error body does not decode as a profile."""
        with pytest.raises(DecodeError):
            UserProfile.from_api({"message": "Not Found"})

    def test_non_object_payload(self):
        """Test that a list payload raises DecodeError."""
        with pytest.raises(DecodeError):
            UserProfile.from_api([make_user()])

    def test_is_immutable(self):
        """Test that profiles cannot be modified in place."""
        profile = UserProfile.from_api(make_user())
        with pytest.raises(ValidationError):
            profile.followers = 0


class TestRepository:
    """Tests for Repository model."""

    def test_from_api(self):
        """Test creating Repository from API response."""
        repo = Repository.from_api(
            make_repo(42, language="Rust", description="Fast", stargazers_count=10)
        )

        assert repo.id == 42
        assert repo.name == "repo-42"
        assert repo.html_url == "https://github.com/octocat/repo-42"
        assert repo.description == "Fast"
        assert repo.stargazers_count == 10
        assert repo.language == "Rust"

    def test_null_language(self):
        """Test repository without a detected language."""
        assert Repository.from_api(make_repo(1, language=None)).language is None

    def test_negative_count_rejected(self):
        """Test that negative counts raise DecodeError."""
        with pytest.raises(DecodeError):
            Repository.from_api(make_repo(1, forks_count=-1))


class TestRawEvent:
    """Tests for RawEvent model."""

    def test_push_event_kind(self):
        """Test that PushEvent maps to the push variant."""
        event = RawEvent.from_api(make_event("PushEvent", "2024-01-05T10:00:00Z"))
        assert event.kind is EventKind.PUSH

    @pytest.mark.parametrize("event_type", ["WatchEvent", "IssuesEvent", "pushevent", ""])
    def test_other_events_ignored(self, event_type):
        """Test that every other tag maps to the ignored variant."""
        event = RawEvent.from_api(make_event(event_type, "2024-01-05T10:00:00Z"))
        assert event.kind is EventKind.IGNORED

    def test_timestamp(self):
        """Test parsed timestamp and lenient failure."""
        good = RawEvent.from_api(make_event("PushEvent", "2024-01-05T10:00:00Z"))
        bad = RawEvent.from_api(make_event("PushEvent", "Jan 5, 2024"))

        assert good.timestamp.year == 2024
        assert bad.timestamp is None

    def test_missing_created_at(self):
        """Test that an event without a timestamp field raises DecodeError."""
        with pytest.raises(DecodeError):
            RawEvent.from_api({"type": "PushEvent"})


class TestLanguageStat:
    """Tests for LanguageStat model."""

    def test_display_label(self):
        """Test the Unknown sentinel gets a friendlier label."""
        assert LanguageStat(language="Go", count=1).display_label == "Go"
        assert LanguageStat(language="Unknown", count=1).display_label == "Other/Unknown"
        assert LanguageStat(language="Other", count=1).display_label == "Other"

    def test_summary_total(self):
        """Test total counts every ranked repository."""
        summary = LanguageSummary(
            ranked=(LanguageStat(language="Go", count=2), LanguageStat(language="C", count=1))
        )
        assert summary.total == 3


class TestContributionSummary:
    """Tests for ContributionSummary model."""

    def test_empty(self):
        """Test summary of an empty histogram."""
        summary = ContributionSummary.from_points([])

        assert summary.total == 0
        assert summary.active_days == 0
        assert summary.busiest_day is None
        assert summary.longest_streak == 0
        assert summary.max_count == 1

    def test_statistics(self):
        """Test totals, busiest day and streaks."""
        points = [
            ContributionPoint(day=date(2024, 1, 1), count=1),
            ContributionPoint(day=date(2024, 1, 2), count=4),
            ContributionPoint(day=date(2024, 1, 3), count=2),
            ContributionPoint(day=date(2024, 1, 5), count=4),
            ContributionPoint(day=date(2024, 1, 6), count=1),
        ]

        summary = ContributionSummary.from_points(points)

        assert summary.total == 12
        assert summary.active_days == 5
        assert summary.busiest_day.day == date(2024, 1, 2)
        assert summary.longest_streak == 3
        assert summary.max_count == 4

    def test_zero_days_break_streak(self):
        """Test that gap-filled zero days end a streak."""
        points = [
            ContributionPoint(day=date(2024, 1, 1), count=1),
            ContributionPoint(day=date(2024, 1, 2), count=0),
            ContributionPoint(day=date(2024, 1, 3), count=1),
            ContributionPoint(day=date(2024, 1, 4), count=1),
        ]

        summary = ContributionSummary.from_points(points)

        assert summary.longest_streak == 2
        assert summary.active_days == 3

    def test_negative_count_rejected(self):
        """Test that counts are non-negative."""
        with pytest.raises(ValidationError):
            ContributionPoint(day=date(2024, 1, 1), count=-1)


class TestInsightsSnapshot:
    """Tests for InsightsSnapshot model."""

    def test_defaults(self):
        """Test the empty snapshot shown before the first load."""
        snapshot = InsightsSnapshot()

        assert snapshot.profile is None
        assert snapshot.repositories == ()
        assert snapshot.contributions == ()
        assert snapshot.languages.ranked == ()
        assert snapshot.error is None
        assert snapshot.contribution_summary.total == 0

    def test_serializes_to_json(self):
        """Test JSON serialization used by the CLI."""
        snapshot = InsightsSnapshot(
            username="octocat",
            profile=UserProfile.from_api(make_user()),
            contributions=(ContributionPoint(day=date(2024, 1, 5), count=2),),
        )

        dumped = snapshot.model_dump(mode="json")

        assert dumped["profile"]["username"] == "octocat"
        assert dumped["contributions"] == [{"day": "2024-01-05", "count": 2}]
