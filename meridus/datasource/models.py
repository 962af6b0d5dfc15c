"""Items and result types returned by the data source client."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

import msgspec


class ListingKind(enum.StrEnum):
    """Listing endpoints exposed under ``/api/github``."""

    REPOS = "repos"
    ISSUES = "issues"
    COMMITS = "commits"


class RepositoryItem(msgspec.Struct, kw_only=True, frozen=True):
    """Repository entry from ``/api/github/repos``."""

    full_name: str
    html_url: str = ""
    stargazers_count: int | None = 0


class IssueItem(msgspec.Struct, kw_only=True, frozen=True):
    """Issue entry from ``/api/github/issues``."""

    number: int
    title: str
    state: str
    html_url: str = ""

    @property
    def is_open(self) -> bool:
        """Return True for open issues."""
        return self.state == "open"


class CommitAuthor(msgspec.Struct, frozen=True):
    """Git author recorded on a commit."""

    name: str = "Unknown"


class CommitDetail(msgspec.Struct, kw_only=True, frozen=True):
    """Git-level commit data nested under ``commit``."""

    message: str = ""
    author: CommitAuthor = msgspec.field(default_factory=CommitAuthor)


class CommitItem(msgspec.Struct, kw_only=True, frozen=True):
    """Commit entry from ``/api/github/commits``."""

    sha: str
    commit: CommitDetail
    html_url: str = ""


ListingItem = RepositoryItem | IssueItem | CommitItem

ITEM_TYPES: typ.Final[dict[ListingKind, type[ListingItem]]] = {
    ListingKind.REPOS: RepositoryItem,
    ListingKind.ISSUES: IssueItem,
    ListingKind.COMMITS: CommitItem,
}


@dc.dataclass(frozen=True, slots=True)
class Fetched:
    """Successful listing fetch.

    Attributes
    ----------
    items
        Every decoded item, in upstream order.
    total
        Number of items upstream returned.

    """

    items: tuple[ListingItem, ...]
    total: int


@dc.dataclass(frozen=True, slots=True)
class FetchFailed:
    """Failed fetch with a human-readable reason.

    ``status_code`` is set when upstream answered with a non-2xx status and
    is ``None`` for transport or decoding failures.
    """

    reason: str
    status_code: int | None = None


FetchResult = Fetched | FetchFailed


@dc.dataclass(frozen=True, slots=True)
class WebsiteStatus:
    """Outcome of probing the website status endpoint."""

    payload: dict[str, typ.Any] | None = None
    error: str | None = None
