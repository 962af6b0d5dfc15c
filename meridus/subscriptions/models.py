"""Subscription records held by the registry."""

from __future__ import annotations

import dataclasses

WILDCARD_REPOSITORY = "*"


@dataclasses.dataclass(frozen=True, slots=True)
class Subscription:
    """Immutable snapshot of one channel's filters.

    An empty ``repositories`` tuple matches every repository, exactly like
    the ``*`` wildcard. An empty ``events`` tuple accepts every event type.
    Both tuples keep insertion order for display.
    """

    channel_id: str
    repositories: tuple[str, ...] = ()
    events: tuple[str, ...] = ()

    @property
    def matches_any_repository(self) -> bool:
        """Return True when no repository filter narrows this subscription."""
        return not self.repositories or WILDCARD_REPOSITORY in self.repositories

    def accepts_repository(self, repository: str) -> bool:
        """Return True when events from ``repository`` pass the filter."""
        return self.matches_any_repository or repository in self.repositories

    def accepts_event(self, event_type: str) -> bool:
        """Return True when ``event_type`` passes the event filter."""
        return not self.events or event_type in self.events
