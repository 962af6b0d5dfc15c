"""Discord REST client used for outbound messages and command registration."""

from __future__ import annotations

import typing as typ

import httpx
import msgspec

from .errors import DiscordAPIError, DiscordConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import DiscordConfig
    from .models import Embed


class BotUser(msgspec.Struct, frozen=True):
    """Subset of the ``/users/@me`` response."""

    id: str
    username: str
    discriminator: str = "0"

    @property
    def tag(self) -> str:
        """Return ``username#discriminator``, or the bare username."""
        if self.discriminator in {"", "0"}:
            return self.username
        return f"{self.username}#{self.discriminator}"


class DiscordRestClient:
    """Minimal Discord REST implementation of ``NotificationSink``."""

    def __init__(
        self,
        config: DiscordConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        if not config.token.strip():
            raise DiscordConfigError.empty_token()

        self._config = config
        self._headers = {
            "Authorization": f"Bot {config.token}",
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        }
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout_s)

    @property
    def config(self) -> DiscordConfig:
        """Return the configuration the client was built with."""
        return self._config

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def send(self, channel_id: str, embed: Embed) -> None:
        """Post ``embed`` as a new message in ``channel_id``."""
        await self._request(
            "POST",
            f"/channels/{channel_id}/messages",
            json={"embeds": [embed.to_dict()]},
        )

    async def fetch_current_user(self) -> BotUser:
        """Return the bot account the token belongs to."""
        response = await self._request("GET", "/users/@me")
        try:
            return msgspec.json.decode(response.content, type=BotUser)
        except msgspec.DecodeError as exc:
            raise DiscordAPIError.transport_error("/users/@me", str(exc)) from exc

    async def register_commands(
        self, definitions: cabc.Sequence[cabc.Mapping[str, typ.Any]]
    ) -> int:
        """Overwrite the application's global slash commands.

        Returns
        -------
        int
            Number of commands Discord reports as registered.

        Raises
        ------
        DiscordConfigError
            If the configuration has no application ID.
        DiscordAPIError
            If Discord rejects the request.

        """
        application_id = self._config.application_id
        if application_id is None:
            raise DiscordConfigError.missing_application_id()
        response = await self._request(
            "PUT",
            f"/applications/{application_id}/commands",
            json=list(definitions),
        )
        registered = response.json()
        return len(registered) if isinstance(registered, list) else 0

    async def _request(
        self,
        method: str,
        route: str,
        *,
        json: object | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method,
                f"{self._config.api_base}{route}",
                json=json,
                headers=self._headers,
            )
        except httpx.HTTPError as exc:
            raise DiscordAPIError.transport_error(route, str(exc)) from exc
        if not response.is_success:
            raise DiscordAPIError.http_error(response.status_code, route)
        return response
