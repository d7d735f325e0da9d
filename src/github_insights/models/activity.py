"""Public event models."""

from datetime import datetime
from enum import Enum

from github_insights.models.base import ApiModel
from github_insights.utils.dates import parse_timestamp

PUSH_EVENT_TYPE = "PushEvent"


class EventKind(str, Enum):
    """Event variants relevant to aggregation."""

    PUSH = "push"
    IGNORED = "ignored"


class RawEvent(ApiModel):
    """Event from the public events feed, reduced to its tag and timestamp."""

    type: str
    created_at: str

    @property
    def kind(self) -> EventKind:
        """Get typed event kind."""
        if self.type == PUSH_EVENT_TYPE:
            return EventKind.PUSH
        return EventKind.IGNORED

    @property
    def timestamp(self) -> datetime | None:
        """Parsed creation time, or None if it is not strict ISO-8601."""
        return parse_timestamp(self.created_at)
