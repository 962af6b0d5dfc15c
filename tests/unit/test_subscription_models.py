"""Unit tests for subscription matching predicates."""

from __future__ import annotations

import pytest

from meridus.subscriptions import Subscription


@pytest.mark.parametrize(
    ("repositories", "candidate", "expected"),
    [
        ((), "octo/anything", True),
        (("*",), "octo/anything", True),
        (("octo/demo",), "octo/demo", True),
        (("octo/demo",), "octo/other", False),
        (("octo/demo", "*"), "octo/other", True),
    ],
)
def test_accepts_repository(
    repositories: tuple[str, ...], candidate: str, *, expected: bool
) -> None:
    """Empty filters and the wildcard match every repository."""
    subscription = Subscription("123", repositories=repositories)
    assert subscription.accepts_repository(candidate) is expected


@pytest.mark.parametrize(
    ("events", "candidate", "expected"),
    [
        ((), "watch", True),
        (("push",), "push", True),
        (("push",), "issues", False),
    ],
)
def test_accepts_event(
    events: tuple[str, ...], candidate: str, *, expected: bool
) -> None:
    """An empty event filter accepts every event type."""
    subscription = Subscription("123", events=events)
    assert subscription.accepts_event(candidate) is expected
