"""Render GitHub webhook events into channel-agnostic notifications.

Rendering is a pure function of the event type and payload; the only other
input is the timestamp, which callers may inject for reproducible output.

Usage
-----
>>> notification = render("push", payload)
>>> notification.title
'📤 Push to octo/demo'

"""

from __future__ import annotations

import typing as typ

from meridus.common.text import first_line, short_sha, truncate
from meridus.common.time import utcnow
from meridus.events.models import EventKind, Notification, NotificationField
from meridus.events.payloads import (
    IssuesEvent,
    PullRequestEvent,
    PushEvent,
    ReleaseEvent,
    UnrecognizedEvent,
    classify,
)
from meridus.logging import get_logger, log_info

if typ.TYPE_CHECKING:
    import datetime as dt

    from meridus.events.payloads import GitHubEvent

logger = get_logger(__name__)

DEFAULT_COLOR = 0x7289DA
DEFAULT_EMOJI = "📋"

RELEASE_NOTES_LIMIT = 200
PUSH_COMMIT_PREVIEW = 3

EVENT_COLORS: typ.Final[dict[str, int]] = {
    EventKind.PUSH: 0x238636,
    EventKind.PULL_REQUEST: 0x8257E5,
    EventKind.ISSUES: 0xF85149,
    EventKind.ISSUE_COMMENT: 0xF85149,
    EventKind.RELEASE: 0x4A9EFF,
    EventKind.FORK: 0x6E7681,
    EventKind.WATCH: 0xE3B341,
    EventKind.CREATE: 0x238636,
    EventKind.DELETE: 0xF85149,
}

EVENT_EMOJI: typ.Final[dict[str, str]] = {
    EventKind.PUSH: "📤",
    EventKind.PULL_REQUEST: "🔀",
    EventKind.ISSUES: "📋",
    EventKind.ISSUE_COMMENT: "💬",
    EventKind.RELEASE: "🚀",
    EventKind.FORK: "🍴",
    EventKind.WATCH: "⭐",
    EventKind.CREATE: "✨",
    EventKind.DELETE: "🗑️",
}


def color_for(event_type: str) -> int:
    """Return the accent color for ``event_type``."""
    return EVENT_COLORS.get(event_type, DEFAULT_COLOR)


def emoji_for(event_type: str) -> str:
    """Return the title icon for ``event_type``."""
    return EVENT_EMOJI.get(event_type, DEFAULT_EMOJI)


class _Presentation(typ.NamedTuple):
    title: str
    url: str | None = None
    description: str | None = None
    fields: tuple[NotificationField, ...] = ()


def _present_push(event: PushEvent) -> _Presentation:
    repo = event.repository
    changes = "\n".join(
        f"[`{short_sha(commit.id)}`]({repo.html_url}/commit/{commit.id}) "
        f"{first_line(commit.message)}"
        for commit in event.commits[:PUSH_COMMIT_PREVIEW]
    )
    author = event.sender.login if event.sender is not None else "Unknown"
    return _Presentation(
        title=f"{emoji_for(EventKind.PUSH)} Push to {repo.full_name}",
        url=event.compare,
        fields=(
            NotificationField("Branch", f"`{event.branch}`", inline=True),
            NotificationField("Commits", str(len(event.commits)), inline=True),
            NotificationField("Author", author, inline=True),
            NotificationField("Changes", changes or "No commit info"),
        ),
    )


def _present_pull_request(event: PullRequestEvent) -> _Presentation:
    pr = event.pull_request
    return _Presentation(
        title=(
            f"{emoji_for(EventKind.PULL_REQUEST)} Pull Request "
            f"{event.action}: #{pr.number}"
        ),
        url=pr.html_url,
        fields=(
            NotificationField("Title", pr.title),
            NotificationField("Author", pr.user.login, inline=True),
            NotificationField(
                "State", "Merged" if pr.merged else pr.state, inline=True
            ),
            NotificationField("Branch", f"{pr.head.ref} → {pr.base.ref}"),
        ),
    )


def _present_issue(event: IssuesEvent) -> _Presentation:
    issue = event.issue
    fields = [
        NotificationField("Title", issue.title),
        NotificationField("Author", issue.user.login, inline=True),
        NotificationField("State", issue.state, inline=True),
    ]
    if issue.labels:
        labels = ", ".join(f"`{label.name}`" for label in issue.labels)
        fields.append(NotificationField("Labels", labels))
    return _Presentation(
        title=f"{emoji_for(EventKind.ISSUES)} Issue {event.action}: #{issue.number}",
        url=issue.html_url,
        fields=tuple(fields),
    )


def _present_release(event: ReleaseEvent) -> _Presentation:
    release = event.release
    fields = [
        NotificationField("Tag", release.tag_name, inline=True),
        NotificationField("Author", release.author.login, inline=True),
        NotificationField(
            "Pre-release", "Yes" if release.prerelease else "No", inline=True
        ),
    ]
    if release.body:
        fields.append(
            NotificationField("Notes", truncate(release.body, RELEASE_NOTES_LIMIT))
        )
    return _Presentation(
        title=(
            f"{emoji_for(EventKind.RELEASE)} Release {event.action}: "
            f"{release.tag_name}"
        ),
        url=release.html_url,
        fields=tuple(fields),
    )


def _present_unrecognized(event: UnrecognizedEvent) -> _Presentation:
    return _Presentation(
        title=(
            f"{emoji_for(event.event_type)} {event.event_type} "
            f"on {event.repository.full_name}"
        ),
        description=f"Event: {event.event_type}",
    )


def _present(event: GitHubEvent) -> _Presentation:
    """Build the title, link and fields for a classified event."""
    match event:
        case PushEvent():
            return _present_push(event)
        case PullRequestEvent():
            return _present_pull_request(event)
        case IssuesEvent():
            return _present_issue(event)
        case ReleaseEvent():
            return _present_release(event)
        case UnrecognizedEvent():
            return _present_unrecognized(event)


def render(
    event_type: str,
    payload: typ.Mapping[str, typ.Any],
    *,
    now: dt.datetime | None = None,
) -> Notification | None:
    """Render a webhook payload into a :class:`Notification`.

    Parameters
    ----------
    event_type
        Value of the ``X-GitHub-Event`` header.
    payload
        Parsed webhook body.
    now
        Timestamp to stamp on the notification; defaults to the current time.

    Returns
    -------
    Notification | None
        The rendered notification, or ``None`` when the payload carries no
        repository to route on.

    Raises
    ------
    EventPayloadError
        If a payload for a supported event type is malformed.

    """
    event = classify(event_type, payload)
    if event is None:
        log_info(logger, "Dropping %s event without repository", event_type)
        return None

    presentation = _present(event)
    return Notification(
        event_type=event_type,
        source_repository=event.repository.full_name,
        color=color_for(event_type),
        title=presentation.title,
        timestamp=now if now is not None else utcnow(),
        url=presentation.url,
        description=presentation.description,
        fields=presentation.fields,
    )
