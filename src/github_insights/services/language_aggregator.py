"""Language frequency across a user's repositories."""

from collections import Counter
from collections.abc import Iterable, Sequence

from github_insights.models.language import (
    OTHER_LANGUAGE,
    UNKNOWN_LANGUAGE,
    LanguageStat,
    LanguageSummary,
)
from github_insights.models.repository import Repository

DEFAULT_LANGUAGE_LIMIT = 7


class LanguageAggregator:
    """Counts repositories per primary language."""

    def __init__(self, limit: int = DEFAULT_LANGUAGE_LIMIT):
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        self.limit = limit

    def aggregate(self, repositories: Iterable[Repository]) -> list[LanguageStat]:
        """Rank languages by repository count, most common first.

        Repositories without a language count as ``"Unknown"``. Ties keep the
        order in which languages were first encountered.
        """
        counts = Counter(repo.language or UNKNOWN_LANGUAGE for repo in repositories)
        # Counter preserves insertion order and sorted() is stable
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [LanguageStat(language=language, count=count) for language, count in ranked]

    def cap(
        self, stats: Sequence[LanguageStat], limit: int | None = None
    ) -> list[LanguageStat]:
        """Keep the top ``limit`` entries and roll the rest into ``"Other"``.

        ``limit`` defaults to the aggregator's own. No ``"Other"`` entry is
        added when the remainder sums to zero.
        """
        if limit is None:
            limit = self.limit
        if len(stats) <= limit:
            return list(stats)

        top = list(stats[:limit])
        other_count = sum(stat.count for stat in stats[limit:])
        if other_count > 0:
            top.append(LanguageStat(language=OTHER_LANGUAGE, count=other_count))
        return top

    def summarize(
        self, repositories: Iterable[Repository], limit: int | None = None
    ) -> LanguageSummary:
        """Build both the canonical ranking and its capped chart view."""
        ranked = self.aggregate(repositories)
        return LanguageSummary(ranked=tuple(ranked), capped=tuple(self.cap(ranked, limit)))
