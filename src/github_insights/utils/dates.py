"""Calendar-day bucketing helpers.

Timestamps are parsed with a strict ISO-8601 profile: extended date
(``YYYY-MM-DD``), a ``T`` separator, extended time (``HH:MM:SS``) with
optional fractional seconds, and an optional ``Z`` or ``+HH:MM`` offset.
Timestamps without an offset are read as UTC.

Day keys are ``yyyy-MM-dd`` strings computed in the formatter timezone,
which is the local system zone unless one is passed explicitly.
"""

import re
from datetime import date, datetime, timedelta, timezone, tzinfo

_TIMESTAMP_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,6})\d*)?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})?"
)
_DAY_KEY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _parse_offset(value: str | None) -> tzinfo:
    if value is None or value == "Z":
        return timezone.utc
    sign = -1 if value[0] == "-" else 1
    hours, minutes = value[1:].split(":")
    return timezone(sign * timedelta(hours=int(hours), minutes=int(minutes)))


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None when it does not conform."""
    if not isinstance(value, str):
        return None
    match = _TIMESTAMP_RE.fullmatch(value)
    if match is None:
        return None

    fraction = match.group("fraction") or "0"
    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            int(fraction.ljust(6, "0")),
            tzinfo=_parse_offset(match.group("offset")),
        )
    except ValueError:
        # Out-of-range fields, e.g. month 13 or offset beyond 24h
        return None


def day_key(moment: datetime, tz: tzinfo | None = None) -> str:
    """Project an aware datetime to its ``yyyy-MM-dd`` key in ``tz``.

    ``tz=None`` means the local system timezone.
    """
    return moment.astimezone(tz).date().isoformat()


def parse_day_key(key: str) -> date | None:
    """Parse a ``yyyy-MM-dd`` key back into a date, or None if malformed."""
    if not _DAY_KEY_RE.fullmatch(key):
        return None
    try:
        return date.fromisoformat(key)
    except ValueError:
        return None
