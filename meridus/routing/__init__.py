"""Route rendered notifications to subscribed channels.

Usage
-----
Relay a notification through the registry::

    from meridus.routing import NotificationDispatcher

    dispatcher = NotificationDispatcher(registry, sink)
    result = await dispatcher.dispatch(notification)
    print(result.delivered, result.failed)

"""

from .dispatch import DispatchResult, NotificationDispatcher
from .observability import RelayEventLogger, RelayEventType
from .router import matches, route

__all__ = [
    "DispatchResult",
    "NotificationDispatcher",
    "RelayEventLogger",
    "RelayEventType",
    "matches",
    "route",
]
