"""NotificationSink protocol for delivering embeds to chat channels.

The router depends only on this port; :class:`DiscordRestClient` is the
production adapter and tests substitute recording fakes.

Usage
-----
>>> from meridus.discord.sink import NotificationSink
>>> isinstance(DiscordRestClient(config), NotificationSink)
True

"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from .models import Embed


@typ.runtime_checkable
class NotificationSink(typ.Protocol):
    """Protocol for posting an embed to a single channel."""

    async def send(self, channel_id: str, embed: Embed) -> None:
        """Deliver ``embed`` to ``channel_id``.

        Parameters
        ----------
        channel_id
            Target channel identifier.
        embed
            Embed to post as a new message.

        Raises
        ------
        Exception
            Any delivery failure. Callers isolate failures per channel.

        """
        ...
