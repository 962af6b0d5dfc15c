"""Common time utilities."""

from __future__ import annotations

import datetime as dt


def utcnow() -> dt.datetime:
    """Return an aware UTC timestamp."""
    return dt.datetime.now(dt.UTC)


def isoformat_utc(value: dt.datetime) -> str:
    """Render ``value`` as an ISO 8601 UTC string with a ``Z`` suffix.

    Discord embeds and the status replies use this form so timestamps read
    the same regardless of the host timezone.

    Examples
    --------
    >>> isoformat_utc(dt.datetime(2024, 7, 1, 12, 30, tzinfo=dt.UTC))
    '2024-07-01T12:30:00.000Z'

    """
    utc = value.astimezone(dt.UTC)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
