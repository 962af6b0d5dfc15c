"""Command replies and Discord interaction constants."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    from meridus.discord.models import Embed


class InteractionType(enum.IntEnum):
    """Inbound interaction kinds handled by Meridus."""

    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(enum.IntEnum):
    """Interaction response kinds emitted by Meridus."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


@dc.dataclass(frozen=True, slots=True)
class CommandReply:
    """Structured reply to a slash command: plain content, an embed, or both."""

    content: str | None = None
    embed: Embed | None = None

    @classmethod
    def text(cls, content: str) -> CommandReply:
        """Return a content-only reply."""
        return cls(content=content)

    @classmethod
    def with_embed(cls, embed: Embed) -> CommandReply:
        """Return an embed-only reply."""
        return cls(embed=embed)

    def message_data(self) -> dict[str, typ.Any]:
        """Return the message body for Discord."""
        data: dict[str, typ.Any] = {}
        if self.content is not None:
            data["content"] = self.content
        if self.embed is not None:
            data["embeds"] = [self.embed.to_dict()]
        return data

    def to_interaction_response(self) -> dict[str, typ.Any]:
        """Serialize as a ``CHANNEL_MESSAGE_WITH_SOURCE`` interaction response."""
        return {
            "type": int(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
            "data": self.message_data(),
        }
