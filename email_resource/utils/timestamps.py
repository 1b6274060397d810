"""Timestamp utilities for UTC handling."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Example:
        >>> now = utc_now()
        >>> now.tzinfo == timezone.utc
        True
    """
    return datetime.now(timezone.utc)


def format_rfc3339(dt: datetime) -> str:
    """Format a datetime as an RFC 3339 UTC timestamp with a 'Z' suffix.

    Naive datetimes are treated as UTC.

    Args:
        dt: Datetime to format

    Returns:
        Timestamp such as "2025-11-04T10:30:00.123456Z"

    Example:
        >>> format_rfc3339(datetime(2025, 11, 4, 10, 30, tzinfo=timezone.utc))
        '2025-11-04T10:30:00Z'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    return dt.replace(tzinfo=None).isoformat() + "Z"
