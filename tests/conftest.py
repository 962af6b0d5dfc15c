"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import datetime as dt

import pytest

from meridus.state import ServiceState
from meridus.subscriptions import SubscriptionRegistry
from tests.helpers.fakes import FakeClock, RecordingSink

_MERIDUS_ENV = (
    "DISCORD_BOT_TOKEN",
    "DISCORD_APP_ID",
    "DISCORD_API_BASE",
    "GITHUB_WEBHOOK_SECRET",
    "MERIDUS_URL",
    "MERIDUS_API_KEY",
    "MERIDUS_HTTP_TIMEOUT_S",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host credentials from leaking into tests."""
    for name in _MERIDUS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry() -> SubscriptionRegistry:
    """Return an empty subscription registry."""
    return SubscriptionRegistry()


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Return a sink that records every delivery."""
    return RecordingSink()


@pytest.fixture
def fake_clock() -> FakeClock:
    """Return a manually advanced monotonic clock."""
    return FakeClock()


@pytest.fixture
def service_state(fake_clock: FakeClock) -> ServiceState:
    """Return runtime state driven by ``fake_clock``."""
    return ServiceState(clock=fake_clock)


@pytest.fixture
def fixed_now() -> dt.datetime:
    """Return a fixed rendering timestamp."""
    return dt.datetime(2024, 7, 1, 12, 30, tzinfo=dt.UTC)
