"""Typed views over GitHub webhook payloads.

Each supported event type decodes into its own struct carrying only the
fields the renderer needs. Anything else becomes an ``UnrecognizedEvent``
that keeps just the raw type and repository. Unknown payload keys are
ignored, so GitHub adding fields never breaks decoding.
"""

from __future__ import annotations

import typing as typ

import msgspec

from meridus.events.errors import EventPayloadError
from meridus.events.models import EventKind


class Account(msgspec.Struct, frozen=True):
    """GitHub user or bot reference."""

    login: str


class RepositoryRef(msgspec.Struct, frozen=True):
    """Repository that emitted the event."""

    full_name: str
    html_url: str = ""


class PushCommit(msgspec.Struct, frozen=True):
    """Commit summary included in push payloads."""

    id: str
    message: str = ""


class PushEvent(msgspec.Struct, kw_only=True, frozen=True):
    """``push`` webhook payload."""

    repository: RepositoryRef
    ref: str = ""
    compare: str | None = None
    commits: list[PushCommit] = msgspec.field(default_factory=list)
    sender: Account | None = None

    @property
    def branch(self) -> str:
        """Return the last path segment of ``ref``."""
        return self.ref.rsplit("/", 1)[-1]


class BranchRef(msgspec.Struct, frozen=True):
    """Head or base side of a pull request."""

    ref: str


class PullRequest(msgspec.Struct, kw_only=True, frozen=True):
    """Pull request object within a ``pull_request`` payload."""

    number: int
    title: str
    state: str
    user: Account
    head: BranchRef
    base: BranchRef
    merged: bool | None = False
    html_url: str | None = None


class PullRequestEvent(msgspec.Struct, kw_only=True, frozen=True):
    """``pull_request`` webhook payload."""

    action: str
    pull_request: PullRequest
    repository: RepositoryRef


class Label(msgspec.Struct, frozen=True):
    """Issue label."""

    name: str


class Issue(msgspec.Struct, kw_only=True, frozen=True):
    """Issue object within an ``issues`` payload."""

    number: int
    title: str
    state: str
    user: Account
    labels: list[Label] = msgspec.field(default_factory=list)
    html_url: str | None = None


class IssuesEvent(msgspec.Struct, kw_only=True, frozen=True):
    """``issues`` webhook payload."""

    action: str
    issue: Issue
    repository: RepositoryRef


class Release(msgspec.Struct, kw_only=True, frozen=True):
    """Release object within a ``release`` payload."""

    tag_name: str
    author: Account
    prerelease: bool = False
    body: str | None = None
    html_url: str | None = None


class ReleaseEvent(msgspec.Struct, kw_only=True, frozen=True):
    """``release`` webhook payload."""

    action: str
    release: Release
    repository: RepositoryRef


class UnrecognizedEvent(msgspec.Struct, kw_only=True, frozen=True):
    """Any event type without dedicated field extraction."""

    event_type: str
    repository: RepositoryRef


TypedEvent = PushEvent | PullRequestEvent | IssuesEvent | ReleaseEvent
GitHubEvent = TypedEvent | UnrecognizedEvent

_TYPED_EVENTS: dict[str, type[TypedEvent]] = {
    EventKind.PUSH: PushEvent,
    EventKind.PULL_REQUEST: PullRequestEvent,
    EventKind.ISSUES: IssuesEvent,
    EventKind.RELEASE: ReleaseEvent,
}


def source_repository(payload: typ.Mapping[str, typ.Any]) -> str | None:
    """Return ``repository.full_name`` when the payload carries one."""
    repository = payload.get("repository")
    if not isinstance(repository, dict):
        return None
    full_name = repository.get("full_name")
    if not isinstance(full_name, str) or not full_name.strip():
        return None
    return full_name


def classify(
    event_type: str, payload: typ.Mapping[str, typ.Any]
) -> GitHubEvent | None:
    """Decode ``payload`` into the variant for ``event_type``.

    Parameters
    ----------
    event_type
        Value of the ``X-GitHub-Event`` header.
    payload
        Parsed JSON body of the webhook.

    Returns
    -------
    GitHubEvent | None
        The typed event, or ``None`` when the payload names no repository.

    Raises
    ------
    EventPayloadError
        If a payload for a supported event type is missing required fields.

    """
    full_name = source_repository(payload)
    if full_name is None:
        return None

    event_cls = _TYPED_EVENTS.get(event_type)
    if event_cls is None:
        html_url = payload["repository"].get("html_url")
        return UnrecognizedEvent(
            event_type=event_type,
            repository=RepositoryRef(
                full_name=full_name,
                html_url=html_url if isinstance(html_url, str) else "",
            ),
        )

    try:
        return msgspec.convert(payload, event_cls)
    except msgspec.ValidationError as exc:
        raise EventPayloadError.invalid(event_type, str(exc)) from exc
