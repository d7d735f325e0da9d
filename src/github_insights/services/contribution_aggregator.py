"""Daily contribution histogram built from event timestamps."""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import timedelta, tzinfo

from github_insights.models.activity import EventKind, RawEvent
from github_insights.models.contribution import ContributionPoint
from github_insights.utils.dates import day_key, parse_day_key, parse_timestamp

logger = logging.getLogger(__name__)


class ContributionAggregator:
    """Buckets timestamps into calendar days and counts them.

    Days are resolved in ``tz``, or in the local system timezone when ``tz``
    is None. Days without events are omitted; see ``fill_gaps``.
    """

    def __init__(self, tz: tzinfo | None = None):
        self.tz = tz

    def aggregate(self, timestamps: Iterable[str]) -> list[ContributionPoint]:
        """Reduce ISO-8601 timestamps to points sorted by day ascending.

        Timestamps that are not strict ISO-8601 are skipped.
        """
        counts: Counter[str] = Counter()
        for value in timestamps:
            moment = parse_timestamp(value)
            if moment is None:
                logger.debug("Skipping unparsable timestamp %r", value)
                continue
            counts[day_key(moment, self.tz)] += 1

        points = []
        for key, count in counts.items():
            day = parse_day_key(key)
            if day is None:
                logger.debug("Skipping malformed day key %r", key)
                continue
            points.append(ContributionPoint(day=day, count=count))

        return sorted(points, key=lambda point: point.day)

    def aggregate_events(self, events: Iterable[RawEvent]) -> list[ContributionPoint]:
        """Aggregate the push events of an event stream."""
        return self.aggregate(
            event.created_at for event in events if event.kind is EventKind.PUSH
        )


def fill_gaps(points: Sequence[ContributionPoint]) -> list[ContributionPoint]:
    """Insert zero-count days so the histogram covers every calendar day.

    The range runs from the first to the last point; ``points`` must be
    sorted by day with unique days, as ``ContributionAggregator`` returns them.
    """
    if not points:
        return []

    counts = {point.day: point.count for point in points}
    first, last = points[0].day, points[-1].day

    filled = []
    day = first
    while day <= last:
        filled.append(ContributionPoint(day=day, count=counts.get(day, 0)))
        day += timedelta(days=1)
    return filled
