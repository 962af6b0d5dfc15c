"""Fan a notification out to every matching channel.

Delivery to each channel runs concurrently and in isolation: one channel's
failure is logged against that channel and never prevents, delays or fails
delivery to its siblings.
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import typing as typ

from meridus.discord.models import embed_from_notification

from .observability import RelayEventLogger
from .router import route

if typ.TYPE_CHECKING:
    from meridus.discord.sink import NotificationSink
    from meridus.events.models import Notification
    from meridus.subscriptions import SubscriptionRegistry


@dc.dataclass(frozen=True, slots=True)
class DispatchResult:
    """Outcome of relaying one notification.

    Attributes
    ----------
    delivered
        Channels the sink accepted the notification for.
    failed
        Channels whose delivery raised.
    skipped
        Matched channels that were not attempted because no sink is
        configured.

    """

    delivered: tuple[str, ...] = ()
    failed: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()

    @property
    def matched(self) -> int:
        """Return the number of channels the router selected."""
        return len(self.delivered) + len(self.failed) + len(self.skipped)


def _partition(
    channels: typ.Sequence[str],
    gathered: list[None | BaseException],
) -> tuple[tuple[str, ...], list[tuple[str, Exception]]]:
    """Split gathered delivery results into delivered channels and failures.

    Raises
    ------
    BaseException
        Re-raised immediately for system-level exceptions such as
        ``KeyboardInterrupt`` or cancellation.

    """
    delivered: list[str] = []
    failures: list[tuple[str, Exception]] = []
    for channel_id, outcome in zip(channels, gathered, strict=True):
        if isinstance(outcome, Exception):
            failures.append((channel_id, outcome))
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            delivered.append(channel_id)
    return tuple(delivered), failures


class NotificationDispatcher:
    """Route notifications through the registry and deliver them to a sink."""

    def __init__(
        self,
        registry: SubscriptionRegistry,
        sink: NotificationSink | None,
        *,
        event_logger: RelayEventLogger | None = None,
    ) -> None:
        """Bind the dispatcher to its registry and delivery sink.

        Parameters
        ----------
        registry
            Shared subscription registry.
        sink
            Delivery adapter; ``None`` when no bot token is configured, in
            which case matched channels are reported as skipped.
        event_logger
            Optional structured logger; a default instance is created when
            omitted.

        """
        self._registry = registry
        self._sink = sink
        self._events = event_logger or RelayEventLogger()

    async def dispatch(self, notification: Notification) -> DispatchResult:
        """Deliver ``notification`` to every channel that subscribes to it."""
        channels = sorted(route(notification, self._registry))
        if not channels:
            result = DispatchResult()
        elif self._sink is None:
            result = DispatchResult(skipped=tuple(channels))
        else:
            result = await self._fan_out(self._sink, channels, notification)
        self._events.log_dispatch_completed(
            event_type=notification.event_type,
            repository=notification.source_repository,
            result=result,
        )
        return result

    async def _fan_out(
        self,
        sink: NotificationSink,
        channels: list[str],
        notification: Notification,
    ) -> DispatchResult:
        embed = embed_from_notification(notification)
        gathered = await asyncio.gather(
            *(sink.send(channel_id, embed) for channel_id in channels),
            return_exceptions=True,
        )
        delivered, failures = _partition(channels, gathered)
        for channel_id in delivered:
            self._events.log_delivery_succeeded(
                channel_id=channel_id,
                event_type=notification.event_type,
                repository=notification.source_repository,
            )
        for channel_id, error in failures:
            self._events.log_delivery_failed(
                channel_id=channel_id,
                event_type=notification.event_type,
                repository=notification.source_repository,
                error=error,
            )
        return DispatchResult(
            delivered=delivered,
            failed=tuple(channel_id for channel_id, _ in failures),
        )
