"""Channel-agnostic notification structures."""

from __future__ import annotations

import datetime as dt  # noqa: TC003
import enum

import msgspec


class EventKind(enum.StrEnum):
    """GitHub event types with dedicated presentation."""

    PUSH = "push"
    PULL_REQUEST = "pull_request"
    ISSUES = "issues"
    ISSUE_COMMENT = "issue_comment"
    RELEASE = "release"
    FORK = "fork"
    WATCH = "watch"
    CREATE = "create"
    DELETE = "delete"


class NotificationField(msgspec.Struct, frozen=True):
    """One ``(name, value, inline)`` entry of a rendered notification."""

    name: str
    value: str
    inline: bool = False


class Notification(msgspec.Struct, kw_only=True, frozen=True):
    """Rendered presentation of a single GitHub event.

    Attributes
    ----------
    event_type
        Raw GitHub event type, e.g. ``push``.
    source_repository
        ``owner/name`` of the repository that emitted the event.
    color
        Embed accent color as a 24-bit integer.
    title
        Headline including the event icon.
    timestamp
        When the notification was rendered.
    url
        Optional link to the event on GitHub.
    description
        Optional free text, used by the unrecognized-event fallback.
    fields
        Ordered detail fields.

    """

    event_type: str
    source_repository: str
    color: int
    title: str
    timestamp: dt.datetime
    url: str | None = None
    description: str | None = None
    fields: tuple[NotificationField, ...] = ()
