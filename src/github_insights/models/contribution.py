"""Contribution histogram models."""

from collections.abc import Sequence
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, Field


class ContributionPoint(BaseModel):
    """Number of push events on one calendar day."""

    model_config = ConfigDict(frozen=True)

    day: date
    count: int = Field(ge=0)


class ContributionSummary(BaseModel):
    """Headline statistics over a contribution histogram."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    active_days: int = 0
    busiest_day: ContributionPoint | None = None
    longest_streak: int = 0  # Consecutive calendar days with events
    max_count: int = 1  # Chart y-range upper bound, never below 1

    @classmethod
    def from_points(cls, points: Sequence[ContributionPoint]) -> "ContributionSummary":
        """Summarize a day-ordered histogram."""
        busiest = None
        longest = 0
        current = 0
        previous_day: date | None = None

        for point in points:
            if busiest is None or point.count > busiest.count:
                busiest = point

            if point.count == 0:
                current = 0
            elif previous_day is not None and point.day - previous_day == timedelta(days=1):
                current += 1
            else:
                current = 1
            longest = max(longest, current)
            previous_day = point.day

        return cls(
            total=sum(point.count for point in points),
            active_days=sum(1 for point in points if point.count > 0),
            busiest_day=busiest if busiest is not None and busiest.count > 0 else None,
            longest_streak=longest,
            max_count=max([1, *(point.count for point in points)]),
        )
