"""Probe resources for liveness, readiness and the root service summary.

Usage
-----
Register health endpoints on the Falcon app::

    from meridus.api.health.resources import HealthResource, ReadyResource

    app.add_route("/", RootResource(state))
    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

from meridus import BOT_NAME, __version__

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from meridus.state import ServiceState

__all__ = ["HealthResource", "ReadyResource", "RootResource"]


class HealthResource:
    """Liveness probe resource returning ``{"status": "ok"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /health requests."""
        resp.media = {"status": "ok"}
        resp.status = HTTPStatus.OK


class ReadyResource:
    """Readiness probe resource returning ``{"status": "ready"}``.

    The relay keeps all state in memory, so it can accept traffic as soon
    as the application object exists.

    """

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /ready requests."""
        resp.media = {"status": "ready"}
        resp.status = HTTPStatus.OK


class RootResource:
    """Service summary at ``GET /``.

    Reports the bot name, package version, uptime in milliseconds and
    whether the Discord token has been verified.

    """

    def __init__(self, state: ServiceState) -> None:
        """Bind the resource to the shared runtime state."""
        self._state = state

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET / requests.

        Parameters
        ----------
        _req
            Falcon request (unused).
        resp
            Falcon response populated with the service summary.

        """
        resp.media = {
            "status": "ok",
            "bot": BOT_NAME,
            "version": __version__,
            "uptime": self._state.uptime_ms,
            "connected": self._state.connected,
        }
        resp.status = HTTPStatus.OK
