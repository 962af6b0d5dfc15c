"""Subscription registry for channel-level event filters.

Usage
-----
Subscribe a channel and inspect the result::

    from meridus.subscriptions import SubscriptionRegistry

    registry = SubscriptionRegistry()
    registry.subscribe("123", "octo/demo", ["push"])
    for channel_id, subscription in registry.list_all().items():
        print(channel_id, subscription.repositories)

"""

from meridus.subscriptions.models import WILDCARD_REPOSITORY, Subscription
from meridus.subscriptions.registry import SubscriptionRegistry

__all__ = ["WILDCARD_REPOSITORY", "Subscription", "SubscriptionRegistry"]
