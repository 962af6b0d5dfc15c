"""ASGI lifespan middleware for the Meridus Falcon application.

On startup the bot token is verified against Discord so ``/status`` and
``GET /`` can report connectivity. On shutdown every outbound HTTP client
the application owns is closed.

Usage
-----
Register the middleware when creating the Falcon app::

    lifecycle = LifecycleMiddleware(state, discord=client, closables=[client])
    app = falcon.asgi.App(middleware=[lifecycle])

"""

from __future__ import annotations

import typing as typ

from meridus.discord.errors import DiscordAPIError
from meridus.logging import get_logger, log_info, log_warning

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from meridus.discord.client import DiscordRestClient
    from meridus.state import ServiceState

__all__ = ["AsyncClosable", "LifecycleMiddleware"]

logger = get_logger(__name__)


class AsyncClosable(typ.Protocol):
    """Resource released with ``await aclose()``."""

    async def aclose(self) -> None:
        """Release the resource."""
        ...


class LifecycleMiddleware:
    """Falcon middleware handling ASGI startup and shutdown events.

    Parameters
    ----------
    state
        Runtime status updated with the Discord connectivity check.
    discord
        Discord client used to verify the bot token; ``None`` when no token
        is configured.
    closables
        Clients closed on shutdown.

    """

    def __init__(
        self,
        state: ServiceState,
        *,
        discord: DiscordRestClient | None = None,
        closables: cabc.Sequence[AsyncClosable] = (),
    ) -> None:
        """Initialize the middleware with shared state and clients."""
        self._state = state
        self._discord = discord
        self._closables = tuple(closables)

    async def process_startup(
        self, _scope: dict[str, typ.Any], _event: dict[str, typ.Any]
    ) -> None:
        """Verify the bot token once per process."""
        if self._discord is None:
            log_info(logger, "DISCORD_BOT_TOKEN not set, running web server only")
            return
        if self._state.connected:
            return
        try:
            user = await self._discord.fetch_current_user()
        except DiscordAPIError as exc:
            self._state.mark_disconnected()
            log_warning(logger, "Discord token verification failed: %s", exc)
            return
        self._state.mark_connected(user.tag)
        log_info(logger, "Bot logged in as %s", user.tag)

    async def process_shutdown(
        self, _scope: dict[str, typ.Any], _event: dict[str, typ.Any]
    ) -> None:
        """Close owned outbound clients."""
        for closable in self._closables:
            await closable.aclose()
