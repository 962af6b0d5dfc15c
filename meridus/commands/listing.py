"""Format data source listings as command replies."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from meridus.common.text import first_line, short_sha, truncate
from meridus.common.time import isoformat_utc
from meridus.datasource.models import (
    CommitItem,
    FetchFailed,
    IssueItem,
    ListingKind,
    RepositoryItem,
)
from meridus.discord.models import Embed, EmbedFooter

from .models import CommandReply

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

    from meridus.datasource.models import FetchResult, ListingItem

LISTING_LIMIT = 10
ISSUE_TITLE_LIMIT = 60
COMMIT_MESSAGE_LIMIT = 50

NOT_CONFIGURED = "❌ MERIDUS_URL or MERIDUS_API_KEY not configured"


def format_repository(item: RepositoryItem) -> str:
    """Return ``[owner/name](url) - ⭐ stars``."""
    return f"[{item.full_name}]({item.html_url}) - ⭐ {item.stargazers_count or 0}"


def format_issue(item: IssueItem) -> str:
    """Return the issue number link, open/closed marker and trimmed title."""
    marker = "🟢" if item.is_open else "🔴"
    title = truncate(item.title, ISSUE_TITLE_LIMIT)
    return f"[#{item.number}]({item.html_url}) {marker} {title}"


def format_commit(item: CommitItem) -> str:
    """Return the short SHA link, trimmed first line and author name."""
    summary = truncate(first_line(item.commit.message), COMMIT_MESSAGE_LIMIT)
    return (
        f"[`{short_sha(item.sha)}`]({item.html_url}) {summary} - "
        f"{item.commit.author.name}"
    )


def _format_item(item: ListingItem) -> str:
    match item:
        case RepositoryItem():
            return format_repository(item)
        case IssueItem():
            return format_issue(item)
        case CommitItem():
            return format_commit(item)


@dc.dataclass(frozen=True, slots=True)
class _ListingStyle:
    title: str
    color: int
    noun: str


_STYLES: typ.Final[dict[ListingKind, _ListingStyle]] = {
    ListingKind.REPOS: _ListingStyle(
        "📚 GitHub Repositories", 0x238636, "repositories"
    ),
    ListingKind.ISSUES: _ListingStyle("📋 GitHub Issues", 0xF85149, "issues"),
    ListingKind.COMMITS: _ListingStyle("📤 Recent Commits", 0x238636, "commits"),
}


def _listing_embed(
    kind: ListingKind,
    items: cabc.Sequence[ListingItem],
    total: int,
    now: dt.datetime,
) -> Embed:
    style = _STYLES[kind]
    shown = items[:LISTING_LIMIT]
    return Embed(
        title=style.title,
        color=style.color,
        description="\n".join(_format_item(item) for item in shown),
        footer=EmbedFooter(f"Showing {len(shown)} of {total} {kind}"),
        timestamp=isoformat_utc(now),
    )


def listing_reply(
    kind: ListingKind, result: FetchResult, *, now: dt.datetime
) -> CommandReply:
    """Turn a listing fetch result into the reply shown to the user.

    Parameters
    ----------
    kind
        Which listing was fetched.
    result
        Outcome of :meth:`DataSourceClient.fetch_listing`.
    now
        Timestamp stamped on the embed.

    Returns
    -------
    CommandReply
        An error line, an empty-listing line, or an embed of at most
        ten entries with a ``Showing N of M`` footer.

    """
    if isinstance(result, FetchFailed):
        if result.status_code is not None:
            return CommandReply.text(
                f"❌ Error fetching {kind}: HTTP {result.status_code}"
            )
        return CommandReply.text(f"❌ Error: {result.reason}")
    if not result.items:
        return CommandReply.text(f"📭 No {_STYLES[kind].noun} found")
    return CommandReply.with_embed(
        _listing_embed(kind, result.items, result.total, now)
    )
