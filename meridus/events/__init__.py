"""GitHub event classification and rendering.

Usage
-----
Render a webhook payload::

    from meridus.events import render

    notification = render("release", payload)
    if notification is not None:
        print(notification.title)

"""

from meridus.events.errors import EventPayloadError
from meridus.events.models import EventKind, Notification, NotificationField
from meridus.events.payloads import GitHubEvent, classify
from meridus.events.render import color_for, emoji_for, render

__all__ = [
    "EventKind",
    "EventPayloadError",
    "GitHubEvent",
    "Notification",
    "NotificationField",
    "classify",
    "color_for",
    "emoji_for",
    "render",
]
