"""Discord message structures.

Structs serialize straight to the JSON Discord expects for message embeds
and interaction responses; unset optional keys are omitted.
"""

from __future__ import annotations

import typing as typ

import msgspec

from meridus import BOT_NAME
from meridus.common.time import isoformat_utc

if typ.TYPE_CHECKING:
    from meridus.events.models import Notification

NOTIFICATION_FOOTER = f"{BOT_NAME} • GitHub"


class EmbedField(msgspec.Struct, frozen=True):
    """Single embed field."""

    name: str
    value: str
    inline: bool = False


class EmbedFooter(msgspec.Struct, frozen=True):
    """Embed footer text."""

    text: str


class Embed(msgspec.Struct, kw_only=True, frozen=True, omit_defaults=True):
    """Rich embed attached to a channel message or command reply."""

    title: str | None = None
    description: str | None = None
    url: str | None = None
    color: int | None = None
    fields: tuple[EmbedField, ...] = ()
    footer: EmbedFooter | None = None
    timestamp: str | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the JSON-compatible representation."""
        return msgspec.to_builtins(self)


def embed_from_notification(notification: Notification) -> Embed:
    """Convert a rendered notification into a Discord embed."""
    return Embed(
        title=notification.title,
        description=notification.description,
        url=notification.url,
        color=notification.color,
        fields=tuple(
            EmbedField(field.name, field.value, inline=field.inline)
            for field in notification.fields
        ),
        footer=EmbedFooter(NOTIFICATION_FOOTER),
        timestamp=isoformat_utc(notification.timestamp),
    )
