"""Combined status at ``GET /api/status``.

Reports the relay's own connectivity, uptime in seconds and subscription
count alongside the website's status document when the website is
configured.
"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from meridus.datasource.client import DataSourceClient
    from meridus.state import ServiceState
    from meridus.subscriptions import SubscriptionRegistry

__all__ = ["StatusResource"]


class StatusResource:
    """Expose bot status and proxy the website status probe."""

    def __init__(
        self,
        state: ServiceState,
        registry: SubscriptionRegistry,
        datasource: DataSourceClient | None = None,
    ) -> None:
        """Bind the resource to shared state and the optional website client."""
        self._state = state
        self._registry = registry
        self._datasource = datasource

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /api/status requests."""
        website: dict[str, typ.Any] | None = None
        website_error: str | None = None
        if self._datasource is not None:
            probe = await self._datasource.fetch_status()
            website, website_error = probe.payload, probe.error

        resp.media = {
            "bot": {
                "connected": self._state.connected,
                "uptime": self._state.uptime_seconds,
                "subscriptions": len(self._registry),
            },
            "website": website,
            "websiteError": website_error,
        }
        resp.status = HTTPStatus.OK
