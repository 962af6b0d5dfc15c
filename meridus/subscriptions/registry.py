"""In-memory registry of channel subscriptions.

The registry is the single owner of subscription state. Webhook routing,
slash commands and the administrative API all share one instance, built at
process start and passed to each collaborator.

Contract
--------
- Adding a repository that is already present is a no-op, on every path.
- ``remove_repository`` never deletes the record, even when the last
  repository goes. An empty record then matches every repository.
- Only ``remove_subscription`` deletes a record.
- Every operation holds one lock for its whole duration, so concurrent
  callers never lose updates. Reads return immutable snapshots.

Usage
-----
>>> registry = SubscriptionRegistry()
>>> registry.subscribe("123", "octo/demo", ["push", "issues"])
Subscription(channel_id='123', repositories=('octo/demo',), events=('push', 'issues'))
>>> registry.remove_repository("123", "octo/demo")
True
>>> registry.get("123").repositories
()

"""

from __future__ import annotations

import dataclasses
import threading
import types
import typing as typ

from meridus.subscriptions.models import Subscription

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dataclasses.dataclass(slots=True)
class _Record:
    """Mutable per-channel state; never leaves the registry."""

    repositories: list[str] = dataclasses.field(default_factory=list)
    # dict keys act as an insertion-ordered set
    events: dict[str, None] = dataclasses.field(default_factory=dict)

    def snapshot(self, channel_id: str) -> Subscription:
        return Subscription(
            channel_id=channel_id,
            repositories=tuple(self.repositories),
            events=tuple(self.events),
        )


class SubscriptionRegistry:
    """Thread-safe mapping of channel identifier to subscription filters."""

    def __init__(self) -> None:
        """Create an empty registry."""
        self._lock = threading.Lock()
        self._records: dict[str, _Record] = {}

    def __len__(self) -> int:
        """Return the number of subscribed channels."""
        with self._lock:
            return len(self._records)

    def _ensure(self, channel_id: str) -> _Record:
        record = self._records.get(channel_id)
        if record is None:
            record = _Record()
            self._records[channel_id] = record
        return record

    @staticmethod
    def _add_repository(record: _Record, repository: str) -> None:
        if repository not in record.repositories:
            record.repositories.append(repository)

    @staticmethod
    def _add_events(record: _Record, events: cabc.Iterable[str]) -> None:
        for event in events:
            record.events.setdefault(event, None)

    def upsert_repository(self, channel_id: str, repository: str) -> Subscription:
        """Create the subscription if needed and add ``repository`` to it.

        Parameters
        ----------
        channel_id
            Discord channel identifier.
        repository
            ``owner/name`` slug or the ``*`` wildcard.

        Returns
        -------
        Subscription
            Snapshot after the update.

        """
        with self._lock:
            record = self._ensure(channel_id)
            self._add_repository(record, repository)
            return record.snapshot(channel_id)

    def merge_events(
        self, channel_id: str, events: cabc.Iterable[str]
    ) -> Subscription:
        """Union ``events`` into the channel's event filter.

        Applying the same events twice leaves the filter unchanged.
        """
        with self._lock:
            record = self._ensure(channel_id)
            self._add_events(record, events)
            return record.snapshot(channel_id)

    def subscribe(
        self,
        channel_id: str,
        repository: str | None,
        events: cabc.Iterable[str] = (),
    ) -> Subscription:
        """Add a repository and merge events as a single atomic update.

        ``repository`` may be ``None`` to create or extend a subscription
        without touching its repository filter.
        """
        with self._lock:
            record = self._ensure(channel_id)
            if repository is not None:
                self._add_repository(record, repository)
            self._add_events(record, events)
            return record.snapshot(channel_id)

    def remove_repository(self, channel_id: str, repository: str) -> bool:
        """Remove every occurrence of ``repository`` from the channel.

        The record itself is kept even if its repository list becomes empty.

        Returns
        -------
        bool
            ``True`` when the channel had a subscription record.

        """
        with self._lock:
            record = self._records.get(channel_id)
            if record is None:
                return False
            record.repositories[:] = [
                repo for repo in record.repositories if repo != repository
            ]
            return True

    def remove_subscription(self, channel_id: str) -> bool:
        """Delete the channel's subscription record.

        Returns
        -------
        bool
            ``True`` when a record existed and was removed.

        """
        with self._lock:
            return self._records.pop(channel_id, None) is not None

    def get(self, channel_id: str) -> Subscription | None:
        """Return a snapshot of the channel's subscription, if any."""
        with self._lock:
            record = self._records.get(channel_id)
            return None if record is None else record.snapshot(channel_id)

    def list_all(self) -> cabc.Mapping[str, Subscription]:
        """Return a read-only snapshot of every subscription."""
        with self._lock:
            snapshot = {
                channel_id: record.snapshot(channel_id)
                for channel_id, record in self._records.items()
            }
        return types.MappingProxyType(snapshot)
