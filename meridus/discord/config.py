"""Configuration for the Discord REST adapter."""

from __future__ import annotations

import dataclasses as dc
import os

from meridus.config import parse_timeout

from .errors import DiscordConfigError

DEFAULT_API_BASE = "https://discord.com/api/v10"


@dc.dataclass(frozen=True, slots=True)
class DiscordConfig:
    """Credentials and tunables for :class:`~meridus.discord.client.DiscordRestClient`.

    Attributes
    ----------
    token
        Bot token sent as ``Authorization: Bot <token>``.
    application_id
        Application snowflake used when registering slash commands.
    api_base
        Base URL of the versioned Discord REST API.
    timeout_s
        Per-request timeout in seconds.
    user_agent
        ``User-Agent`` header; Discord requires the ``DiscordBot`` prefix.

    """

    token: str
    application_id: str | None = None
    api_base: str = DEFAULT_API_BASE
    timeout_s: float = 10.0
    user_agent: str = "DiscordBot (https://www.meridusdev.in.th, 1.0.0)"

    @classmethod
    def from_env(cls) -> DiscordConfig:
        """Build configuration from ``DISCORD_*`` environment variables.

        Raises
        ------
        DiscordConfigError
            If ``DISCORD_BOT_TOKEN`` is unset or blank.
        ValueError
            If ``MERIDUS_HTTP_TIMEOUT_S`` is not a positive number.

        """
        token = os.environ.get("DISCORD_BOT_TOKEN", "").strip()
        if not token:
            raise DiscordConfigError.missing_token()
        application_id = os.environ.get("DISCORD_APP_ID", "").strip() or None
        api_base = os.environ.get("DISCORD_API_BASE", "").strip() or DEFAULT_API_BASE
        return cls(
            token=token,
            application_id=application_id,
            api_base=api_base.rstrip("/"),
            timeout_s=parse_timeout("MERIDUS_HTTP_TIMEOUT_S", 10.0),
        )
