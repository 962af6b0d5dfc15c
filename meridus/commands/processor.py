"""Slash-command handling against the subscription registry.

Every handler returns a :class:`CommandReply`; missing arguments, unknown
channels and upstream failures all become replies rather than exceptions.

Usage
-----
>>> processor = CommandProcessor(registry, state)
>>> reply = await processor.handle("ping", [])
>>> reply.content
'🏓 Pong! Bot is online.'

"""

from __future__ import annotations

import typing as typ

from meridus import BOT_NAME
from meridus.common.time import isoformat_utc, utcnow
from meridus.datasource.models import ListingKind
from meridus.discord.models import Embed, EmbedField
from meridus.logging import get_logger, log_debug, log_info

from .listing import NOT_CONFIGURED, listing_reply
from .models import CommandReply
from .options import flatten_options, parse_events, string_arg

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

    from meridus.datasource.client import DataSourceClient
    from meridus.state import ServiceState
    from meridus.subscriptions import Subscription, SubscriptionRegistry

    CommandArgs = cabc.Mapping[str, typ.Any]
    CommandHandler = cabc.Callable[[CommandArgs], cabc.Awaitable[CommandReply]]

logger = get_logger(__name__)

INFO_COLOR = 0x7289DA
SUCCESS_COLOR = 0x238636


def _subscription_embed(subscription: Subscription) -> Embed:
    return Embed(
        title="📋 Subscriptions",
        color=INFO_COLOR,
        fields=(
            EmbedField("Repositories", "\n".join(subscription.repositories)),
            EmbedField("Events", ", ".join(subscription.events) or "All"),
        ),
    )


def _overview_line(subscription: Subscription) -> str:
    return f"<#{subscription.channel_id}>: {', '.join(subscription.repositories)}"


class CommandProcessor:
    """Dispatch slash commands by name to their handlers."""

    def __init__(
        self,
        registry: SubscriptionRegistry,
        state: ServiceState,
        *,
        datasource: DataSourceClient | None = None,
        clock: cabc.Callable[[], dt.datetime] = utcnow,
    ) -> None:
        """Bind the processor to shared state.

        Parameters
        ----------
        registry
            Shared subscription registry.
        state
            Runtime status reported by ``/status``.
        datasource
            Website listing client; ``None`` disables ``/repos``,
            ``/issues`` and ``/commits``.
        clock
            Source of embed timestamps.

        """
        self._registry = registry
        self._state = state
        self._datasource = datasource
        self._clock = clock
        self._handlers: dict[str, CommandHandler] = {
            "ping": self._ping,
            "status": self._status,
            "subscribe": self._subscribe,
            "unsubscribe": self._unsubscribe,
            "list": self._list,
            "test": self._test,
            "repos": self._repos,
            "issues": self._issues,
            "commits": self._commits,
        }

    async def handle(
        self,
        name: str,
        options: cabc.Iterable[cabc.Mapping[str, typ.Any]] | None = None,
    ) -> CommandReply:
        """Run the command ``name`` with raw Discord ``options``.

        Parameters
        ----------
        name
            Slash-command name without the leading ``/``.
        options
            Discord option list, possibly containing nested groups.

        Returns
        -------
        CommandReply
            Reply to post back to the invoking user.

        """
        handler = self._handlers.get(name)
        if handler is None:
            log_info(logger, "Unknown command %r", name)
            return CommandReply.text(f"❌ Unknown command: {name}")
        log_debug(logger, "Handling /%s", name)
        return await handler(flatten_options(options))

    async def _ping(self, _args: CommandArgs) -> CommandReply:
        return CommandReply.text("🏓 Pong! Bot is online.")

    async def _status(self, _args: CommandArgs) -> CommandReply:
        online = "🟢 Online" if self._state.connected else "🔴 Offline"
        return CommandReply.with_embed(
            Embed(
                title=f"📊 {BOT_NAME} Status",
                color=INFO_COLOR,
                fields=(
                    EmbedField("Status", online, inline=True),
                    EmbedField(
                        "Uptime", f"{self._state.uptime_seconds}s", inline=True
                    ),
                    EmbedField(
                        "Subscriptions",
                        f"{len(self._registry)} channels",
                        inline=True,
                    ),
                ),
                timestamp=isoformat_utc(self._clock()),
            )
        )

    async def _subscribe(self, args: CommandArgs) -> CommandReply:
        channel_id = string_arg(args, "channel")
        repository = string_arg(args, "repo")
        if channel_id is None or repository is None:
            return CommandReply.text("❌ Usage: /subscribe <channel> <repo> [events]")

        events = parse_events(string_arg(args, "events"))
        subscription = self._registry.subscribe(channel_id, repository, events)
        return CommandReply.with_embed(
            Embed(
                title="✅ Subscribed",
                description=(
                    f"Now receiving events for **{repository}** in this channel"
                ),
                color=SUCCESS_COLOR,
                fields=(
                    EmbedField("Events", ", ".join(subscription.events) or "All"),
                ),
            )
        )

    async def _unsubscribe(self, args: CommandArgs) -> CommandReply:
        channel_id = string_arg(args, "channel")
        if channel_id is None:
            return CommandReply.text("❌ Usage: /unsubscribe <channel> [repo]")

        repository = string_arg(args, "repo")
        if repository is None:
            if not self._registry.remove_subscription(channel_id):
                return CommandReply.text("❌ No subscriptions found")
            return CommandReply.text("✅ All subscriptions removed")

        if not self._registry.remove_repository(channel_id, repository):
            return CommandReply.text("❌ No subscriptions found")
        return CommandReply.text(f"✅ Unsubscribed from {repository}")

    async def _list(self, args: CommandArgs) -> CommandReply:
        channel_id = string_arg(args, "channel")
        if channel_id is not None:
            subscription = self._registry.get(channel_id)
            # An emptied record still routes everything but lists as absent.
            if subscription is None or not subscription.repositories:
                return CommandReply.text("❌ No subscriptions for this channel")
            return CommandReply.with_embed(_subscription_embed(subscription))

        lines = [_overview_line(sub) for sub in self._registry.list_all().values()]
        return CommandReply.with_embed(
            Embed(
                title="📋 All Subscriptions",
                color=INFO_COLOR,
                description="\n".join(lines) or "No subscriptions",
            )
        )

    async def _test(self, _args: CommandArgs) -> CommandReply:
        now = isoformat_utc(self._clock())
        return CommandReply.with_embed(
            Embed(
                title="🧪 Test Notification",
                description="If you see this, the bot is working correctly!",
                color=INFO_COLOR,
                fields=(
                    EmbedField("Time", now),
                    EmbedField("Status", "✅ Bot is operational"),
                ),
                timestamp=now,
            )
        )

    async def _listing(
        self, kind: ListingKind, repository: str | None = None
    ) -> CommandReply:
        if self._datasource is None:
            return CommandReply.text(NOT_CONFIGURED)
        result = await self._datasource.fetch_listing(kind, repo=repository)
        return listing_reply(kind, result, now=self._clock())

    async def _repos(self, _args: CommandArgs) -> CommandReply:
        return await self._listing(ListingKind.REPOS)

    async def _issues(self, args: CommandArgs) -> CommandReply:
        return await self._listing(ListingKind.ISSUES, string_arg(args, "repo"))

    async def _commits(self, args: CommandArgs) -> CommandReply:
        return await self._listing(ListingKind.COMMITS, string_arg(args, "repo"))
