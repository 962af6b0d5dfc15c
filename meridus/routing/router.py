"""Match notifications against channel subscriptions.

Matching is evaluated against one ``list_all()`` snapshot per event, so a
concurrent subscribe or unsubscribe either applies to the whole routing
decision or to none of it.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from meridus.events.models import Notification
    from meridus.subscriptions import Subscription, SubscriptionRegistry


def matches(subscription: Subscription, notification: Notification) -> bool:
    """Return True when ``notification`` passes both of the channel's filters."""
    return subscription.accepts_repository(
        notification.source_repository
    ) and subscription.accepts_event(notification.event_type)


def route(
    notification: Notification, registry: SubscriptionRegistry
) -> frozenset[str]:
    """Return the channels that should receive ``notification``.

    Parameters
    ----------
    notification
        Rendered event carrying its source repository and event type.
    registry
        Registry consulted once for a consistent snapshot.

    Returns
    -------
    frozenset[str]
        Identifiers of every matching channel; empty when nothing matches.

    """
    return frozenset(
        channel_id
        for channel_id, subscription in registry.list_all().items()
        if matches(subscription, notification)
    )
