"""Unit-test fixtures for the HTTP surface."""

from __future__ import annotations

import typing as typ

import falcon.testing
import pytest

from meridus.api import AppDependencies, create_app
from meridus.config import RelayConfig
from tests.helpers.api import API_KEY, WEBHOOK_SECRET
from tests.helpers.fakes import DiscordStub

if typ.TYPE_CHECKING:
    from meridus.state import ServiceState
    from meridus.subscriptions import SubscriptionRegistry


@pytest.fixture
def relay_config() -> RelayConfig:
    """Return boundary configuration with both secrets set."""
    return RelayConfig(webhook_secret=WEBHOOK_SECRET, api_key=API_KEY)


@pytest.fixture
def discord_stub() -> DiscordStub:
    """Return a Discord API stub that accepts every message."""
    return DiscordStub()


@pytest.fixture
def app_deps(
    registry: SubscriptionRegistry,
    service_state: ServiceState,
    relay_config: RelayConfig,
    discord_stub: DiscordStub,
) -> AppDependencies:
    """Return dependencies wired to the Discord stub."""
    return AppDependencies(
        registry=registry,
        state=service_state,
        relay_config=relay_config,
        discord=discord_stub.client(),
    )


@pytest.fixture
def api_client(app_deps: AppDependencies) -> falcon.testing.TestClient:
    """Return a test client for the fully wired application."""
    return falcon.testing.TestClient(create_app(app_deps))
