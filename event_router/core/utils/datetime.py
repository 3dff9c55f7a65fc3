from datetime import datetime, timezone

from dateutil.parser import ParserError, parse


def from_epoch(value: str | int | float | None, unit: str = "ms") -> datetime | None:
    """Convert an epoch timestamp in seconds ("s") or milliseconds ("ms") to a UTC datetime."""
    try:
        seconds = float(value) / 1000 if unit == "ms" else float(value)
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp, assuming UTC when no offset is given."""
    try:
        timestamp = parse(value)
    except (ParserError, TypeError, ValueError, OverflowError):
        return None

    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(tz=timezone.utc)
