"""Build application dependencies from environment configuration.

Usage
-----
Assemble the full dependency set for the runtime::

    from meridus.api.factory import build_dependencies

    app = create_app(build_dependencies())

"""

from __future__ import annotations

from meridus.api.app import AppDependencies
from meridus.config import RelayConfig
from meridus.datasource import DataSourceClient, DataSourceConfig
from meridus.discord import DiscordConfig, DiscordConfigError, DiscordRestClient
from meridus.logging import get_logger, log_info
from meridus.state import ServiceState
from meridus.subscriptions import SubscriptionRegistry

__all__ = ["build_dependencies"]

logger = get_logger(__name__)


def _build_discord() -> DiscordRestClient | None:
    try:
        config = DiscordConfig.from_env()
    except DiscordConfigError as exc:
        log_info(logger, "Discord delivery disabled: %s", exc)
        return None
    return DiscordRestClient(config)


def _build_datasource() -> DataSourceClient | None:
    config = DataSourceConfig.from_env()
    if config is None:
        log_info(logger, "Website listings disabled: MERIDUS_URL or key unset")
        return None
    return DataSourceClient(config)


def build_dependencies() -> AppDependencies:
    """Build ``AppDependencies`` from the current environment.

    A missing bot token disables delivery and a missing website URL or API
    key disables listings; neither prevents the service from starting.

    Returns
    -------
    AppDependencies
        Fresh registry and state plus whichever outbound clients are
        configured.

    Raises
    ------
    ValueError
        If ``MERIDUS_HTTP_TIMEOUT_S`` is set to an invalid value.

    """
    return AppDependencies(
        registry=SubscriptionRegistry(),
        state=ServiceState(),
        relay_config=RelayConfig.from_env(),
        discord=_build_discord(),
        datasource=_build_datasource(),
    )
