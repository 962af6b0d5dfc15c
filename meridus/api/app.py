"""Application factory for the Meridus Falcon ASGI application.

This module provides ``create_app()`` which wires the subscription
registry, renderer, dispatcher and command processor behind the HTTP
routes.

Usage
-----
Create an app with in-memory state and no outbound clients::

    app = create_app()

Create an app with explicit collaborators::

    from meridus.api.app import AppDependencies, create_app

    deps = AppDependencies(
        registry=SubscriptionRegistry(),
        state=ServiceState(),
        relay_config=RelayConfig.from_env(),
        discord=DiscordRestClient(DiscordConfig.from_env()),
    )
    app = create_app(deps)

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon.asgi

from meridus.api.commands.resources import CommandsResource
from meridus.api.errors import (
    AuthenticationError,
    InvalidInputError,
    handle_authentication_error,
    handle_invalid_input,
)
from meridus.api.health.resources import HealthResource, ReadyResource, RootResource
from meridus.api.middleware import LifecycleMiddleware
from meridus.api.status.resources import StatusResource
from meridus.api.subscriptions.resources import SubscriptionsResource
from meridus.api.webhooks.resources import GitHubWebhookResource
from meridus.commands import CommandProcessor
from meridus.config import RelayConfig
from meridus.routing import NotificationDispatcher, RelayEventLogger
from meridus.state import ServiceState
from meridus.subscriptions import SubscriptionRegistry

if typ.TYPE_CHECKING:
    from meridus.api.middleware import AsyncClosable
    from meridus.datasource.client import DataSourceClient
    from meridus.discord.client import DiscordRestClient

__all__ = ["AppDependencies", "create_app"]


@dc.dataclass(frozen=True, slots=True)
class AppDependencies:
    """Collaborators shared by every route of one application instance.

    Attributes
    ----------
    registry
        Subscription registry; the single owner of subscription state.
    state
        Runtime status (start time, Discord connectivity).
    relay_config
        Webhook secret and API key checked at the boundary.
    discord
        Discord client used as the notification sink; ``None`` disables
        delivery.
    datasource
        Website client for listings and the status probe; ``None`` when
        unconfigured.

    """

    registry: SubscriptionRegistry = dc.field(default_factory=SubscriptionRegistry)
    state: ServiceState = dc.field(default_factory=ServiceState)
    relay_config: RelayConfig = dc.field(default_factory=RelayConfig)
    discord: DiscordRestClient | None = None
    datasource: DataSourceClient | None = None

    def closables(self) -> tuple[AsyncClosable, ...]:
        """Return the outbound clients to close on shutdown."""
        return tuple(
            client for client in (self.discord, self.datasource) if client is not None
        )


def create_app(
    dependencies: AppDependencies | None = None,
) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Parameters
    ----------
    dependencies
        Optional application dependencies. When ``None``, an empty registry
        and default configuration are used and nothing is delivered.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    deps = dependencies or AppDependencies()
    event_logger = RelayEventLogger()
    dispatcher = NotificationDispatcher(
        deps.registry, deps.discord, event_logger=event_logger
    )
    processor = CommandProcessor(
        deps.registry, deps.state, datasource=deps.datasource
    )
    lifecycle = LifecycleMiddleware(
        deps.state, discord=deps.discord, closables=deps.closables()
    )

    app = falcon.asgi.App(middleware=[lifecycle])  # type: ignore[no-matching-overload]  # Falcon stubs

    app.add_route("/", RootResource(deps.state))
    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())
    app.add_route(
        "/api/webhooks/github",
        GitHubWebhookResource(
            deps.relay_config, dispatcher, event_logger=event_logger
        ),
    )
    app.add_route(
        "/api/subscriptions",
        SubscriptionsResource(deps.relay_config, deps.registry),
    )
    app.add_route("/api/commands", CommandsResource(deps.relay_config, processor))
    app.add_route(
        "/api/status",
        StatusResource(deps.state, deps.registry, deps.datasource),
    )

    app.add_error_handler(AuthenticationError, handle_authentication_error)
    app.add_error_handler(InvalidInputError, handle_invalid_input)

    return app
