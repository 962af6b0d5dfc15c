"""Process entrypoint: Granian serving the Meridus ASGI application.

Granian imports ``meridus.runtime:create_app`` as a factory, so every worker
builds its own registry and outbound clients from the environment.

Server settings:

- ``MERIDUS_HOST``: bind address, ``0.0.0.0`` unless set
- ``MERIDUS_PORT``: listen port, ``3000`` unless set
- ``MERIDUS_LOG_LEVEL``: femtologging level, ``INFO`` unless set

Application settings (``DISCORD_*``, ``GITHUB_WEBHOOK_SECRET``,
``MERIDUS_URL``, ``MERIDUS_API_KEY``) are read by
:func:`meridus.api.factory.build_dependencies`.
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ

from meridus.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["ServerSettings", "create_app", "main"]

logger = get_logger(__name__)

DEFAULT_HOST = "0.0.0.0"  # noqa: S104 - containers must accept external traffic
DEFAULT_PORT = "3000"
APP_FACTORY = "meridus.runtime:create_app"

_PORT_RANGE = range(1, 65536)


def _parse_port(raw: str) -> int:
    """Return ``raw`` as a TCP port.

    Raises
    ------
    SystemExit
        With status 1 when ``raw`` is not an integer between 1 and 65535.

    """
    try:
        port = int(raw)
    except ValueError:
        port = None
    if port is None or port not in _PORT_RANGE:
        log_error(logger, "Invalid MERIDUS_PORT value: %r (must be 1-65535)", raw)
        raise SystemExit(1)
    return port


@dc.dataclass(frozen=True, slots=True)
class ServerSettings:
    """Bind address and log level for the Granian server."""

    host: str = DEFAULT_HOST
    port: int = int(DEFAULT_PORT)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ServerSettings:
        """Read ``MERIDUS_HOST``, ``MERIDUS_PORT`` and ``MERIDUS_LOG_LEVEL``."""
        return cls(
            host=os.environ.get("MERIDUS_HOST", DEFAULT_HOST),
            port=_parse_port(os.environ.get("MERIDUS_PORT", DEFAULT_PORT)),
            log_level=os.environ.get("MERIDUS_LOG_LEVEL", "INFO"),
        )


def create_app() -> falcon.asgi.App:
    """Build the application with dependencies taken from the environment."""
    from meridus.api.app import create_app as create_api_app
    from meridus.api.factory import build_dependencies

    return create_api_app(build_dependencies())


def main() -> None:
    """Configure logging and serve the application until interrupted."""
    from granian import Granian
    from granian.constants import Interfaces

    settings = ServerSettings.from_env()
    level, substituted = configure_logging(settings.log_level)
    if substituted:
        log_warning(
            logger,
            "Invalid MERIDUS_LOG_LEVEL %r, falling back to %s",
            settings.log_level,
            level,
        )
    log_info(
        logger,
        "Starting Meridus relay on %s:%d (log_level=%s)",
        settings.host,
        settings.port,
        level,
    )

    Granian(
        APP_FACTORY,
        address=settings.host,
        port=settings.port,
        interface=Interfaces.ASGI,
        factory=True,
    ).serve()


if __name__ == "__main__":
    main()
