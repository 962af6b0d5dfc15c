"""Discord REST adapter: embeds, delivery and slash-command registration.

Usage
-----
Post a rendered notification to a channel::

    from meridus.discord import DiscordConfig, DiscordRestClient
    from meridus.discord import embed_from_notification

    client = DiscordRestClient(DiscordConfig.from_env())
    await client.send("123", embed_from_notification(notification))
    await client.aclose()

"""

from .client import BotUser, DiscordRestClient
from .commands import COMMAND_DEFINITIONS, OptionType
from .config import DiscordConfig
from .errors import DiscordAPIError, DiscordConfigError
from .models import Embed, EmbedField, EmbedFooter, embed_from_notification
from .sink import NotificationSink

__all__ = [
    "COMMAND_DEFINITIONS",
    "BotUser",
    "DiscordAPIError",
    "DiscordConfig",
    "DiscordConfigError",
    "DiscordRestClient",
    "Embed",
    "EmbedField",
    "EmbedFooter",
    "NotificationSink",
    "OptionType",
    "embed_from_notification",
]
