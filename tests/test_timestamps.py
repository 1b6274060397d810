"""Unit tests for timestamp utilities."""

from datetime import datetime, timedelta, timezone

from email_resource.utils.timestamps import format_rfc3339, utc_now


def test_utc_now_is_aware():
    now = utc_now()

    assert now.tzinfo == timezone.utc


def test_format_with_microseconds():
    dt = datetime(2025, 11, 4, 10, 30, 0, 123456, tzinfo=timezone.utc)

    assert format_rfc3339(dt) == "2025-11-04T10:30:00.123456Z"


def test_format_whole_seconds():
    dt = datetime(2025, 11, 4, 10, 30, tzinfo=timezone.utc)

    assert format_rfc3339(dt) == "2025-11-04T10:30:00Z"


def test_format_converts_to_utc():
    tz = timezone(timedelta(hours=2))
    dt = datetime(2025, 11, 4, 12, 30, tzinfo=tz)

    assert format_rfc3339(dt) == "2025-11-04T10:30:00Z"


def test_format_naive_treated_as_utc():
    assert format_rfc3339(datetime(2025, 1, 2, 3, 4, 5)) == "2025-01-02T03:04:05Z"
