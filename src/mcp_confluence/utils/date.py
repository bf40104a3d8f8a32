"""Utility functions for date operations."""

from datetime import datetime, timezone

import dateutil.parser


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse an upstream timestamp into a datetime.

    Accepts ISO 8601 strings in either API generation's flavour
    (``2024-01-01T10:00:00.000+0000`` or ``2024-01-01T10:00:00.000Z``)
    and epoch milliseconds.

    Args:
        date_str: Date string, epoch milliseconds, or None

    Returns:
        The parsed datetime, or None for empty input

    Raises:
        ValueError: If the string is not a recognisable date
    """
    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")
