"""Text trimming helpers used when rendering Discord content.

Truncation is silent: the result is a prefix of the source text and never
longer than the requested budget.
"""

from __future__ import annotations


def truncate(text: str, limit: int) -> str:
    """Return at most ``limit`` characters of ``text``.

    Examples
    --------
    >>> truncate("release notes", 7)
    'release'

    """
    if limit < 0:
        msg = f"limit must be non-negative, got {limit}"
        raise ValueError(msg)
    return text[:limit]


def first_line(text: str | None) -> str:
    """Return the first line of ``text`` (empty for ``None``)."""
    if not text:
        return ""
    return text.split("\n", 1)[0]


def short_sha(sha: str, length: int = 7) -> str:
    """Return the abbreviated form of a commit SHA."""
    return sha[:length]
