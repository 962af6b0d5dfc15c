"""Slash-command definitions registered with Discord."""

from __future__ import annotations

import enum
import typing as typ


class OptionType(enum.IntEnum):
    """Discord application command option types used by Meridus."""

    STRING = 3
    CHANNEL = 7


def _option(
    name: str, description: str, kind: OptionType, *, required: bool = False
) -> dict[str, typ.Any]:
    return {
        "name": name,
        "description": description,
        "type": int(kind),
        "required": required,
    }


_REPO_FILTER = _option(
    "repo", "GitHub repository (owner/repo)", OptionType.STRING
)

COMMAND_DEFINITIONS: typ.Final[tuple[dict[str, typ.Any], ...]] = (
    {"name": "ping", "description": "Check bot connectivity"},
    {"name": "status", "description": "Check bot status and subscriptions"},
    {
        "name": "subscribe",
        "description": "Subscribe to GitHub repository events",
        "options": [
            _option(
                "channel",
                "Discord channel for notifications",
                OptionType.CHANNEL,
                required=True,
            ),
            _option(
                "repo",
                "GitHub repository (owner/repo)",
                OptionType.STRING,
                required=True,
            ),
            _option(
                "events", "Events to receive (comma-separated)", OptionType.STRING
            ),
        ],
    },
    {
        "name": "unsubscribe",
        "description": "Unsubscribe from repository events",
        "options": [
            _option(
                "channel", "Discord channel", OptionType.CHANNEL, required=True
            ),
            _option(
                "repo",
                "GitHub repository (leave empty to remove all)",
                OptionType.STRING,
            ),
        ],
    },
    {
        "name": "list",
        "description": "List subscriptions",
        "options": [_option("channel", "Filter by channel", OptionType.CHANNEL)],
    },
    {"name": "test", "description": "Send a test notification"},
    {"name": "repos", "description": "List GitHub repositories"},
    {
        "name": "issues",
        "description": "List GitHub issues",
        "options": [_REPO_FILTER],
    },
    {
        "name": "commits",
        "description": "List recent commits",
        "options": [_REPO_FILTER],
    },
)
