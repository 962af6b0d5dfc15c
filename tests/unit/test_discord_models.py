"""Unit tests for Discord embeds and command definitions."""

from __future__ import annotations

import typing as typ

from meridus.discord import COMMAND_DEFINITIONS, Embed, embed_from_notification
from meridus.discord.commands import OptionType
from meridus.discord.models import NOTIFICATION_FOOTER
from meridus.events import Notification, NotificationField

if typ.TYPE_CHECKING:
    import datetime as dt


def test_empty_embed_serializes_to_empty_object() -> None:
    """Unset optional keys are omitted from the payload."""
    assert Embed().to_dict() == {}


def test_embed_from_notification(fixed_now: dt.datetime) -> None:
    """Notifications map one-to-one onto embeds with the relay footer."""
    notification = Notification(
        event_type="push",
        source_repository="octo/demo",
        color=0x238636,
        title="📤 Push to octo/demo",
        timestamp=fixed_now,
        url="https://github.com/octo/demo/compare/a...b",
        fields=(NotificationField("Branch", "`main`", inline=True),),
    )

    payload = embed_from_notification(notification).to_dict()

    assert payload == {
        "title": "📤 Push to octo/demo",
        "url": "https://github.com/octo/demo/compare/a...b",
        "color": 0x238636,
        "fields": [{"name": "Branch", "value": "`main`", "inline": True}],
        "footer": {"text": NOTIFICATION_FOOTER},
        "timestamp": "2024-07-01T12:30:00.000Z",
    }
    assert NOTIFICATION_FOOTER == "MeridusBot • GitHub"


def test_command_definitions_cover_every_command() -> None:
    """The nine slash commands are registered in a stable order."""
    assert tuple(d["name"] for d in COMMAND_DEFINITIONS) == (
        "ping",
        "status",
        "subscribe",
        "unsubscribe",
        "list",
        "test",
        "repos",
        "issues",
        "commits",
    )


def test_subscribe_options_are_typed() -> None:
    """``/subscribe`` takes a required channel and repository."""
    subscribe = next(d for d in COMMAND_DEFINITIONS if d["name"] == "subscribe")
    options = {option["name"]: option for option in subscribe["options"]}

    assert options["channel"]["type"] == OptionType.CHANNEL
    assert options["channel"]["required"] is True
    assert options["repo"]["required"] is True
    assert options["events"]["required"] is False
