"""Unit tests for shared text and time helpers."""

from __future__ import annotations

import datetime as dt

import pytest

from meridus.common.text import first_line, short_sha, truncate
from meridus.common.time import isoformat_utc


def test_truncate() -> None:
    """Text is cut to the limit and short text is untouched."""
    assert truncate("release notes", 7) == "release"
    assert truncate("short", 200) == "short"


def test_truncate_rejects_negative_limit() -> None:
    """A negative limit is a programming error."""
    with pytest.raises(ValueError, match="non-negative"):
        truncate("text", -1)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("Fix relay\n\nbody", "Fix relay"), ("", ""), (None, "")],
)
def test_first_line(text: str | None, expected: str) -> None:
    """Only the summary line of a message is kept."""
    assert first_line(text) == expected


def test_short_sha() -> None:
    """SHAs are abbreviated to seven characters."""
    assert short_sha("0123456789abcdef") == "0123456"


def test_isoformat_utc_normalises_offsets() -> None:
    """Aware timestamps are converted to UTC with millisecond precision."""
    bangkok = dt.timezone(dt.timedelta(hours=7))
    moment = dt.datetime(2024, 7, 1, 19, 30, 5, 123456, tzinfo=bangkok)

    assert isoformat_utc(moment) == "2024-07-01T12:30:05.123Z"
