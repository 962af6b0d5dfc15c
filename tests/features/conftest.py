"""Shared fixtures and steps for BDD feature tests."""

from __future__ import annotations

import falcon.testing
import pytest
from pytest_bdd import given, parsers, then, when

from meridus.api import AppDependencies, create_app
from meridus.config import RelayConfig
from meridus.subscriptions import SubscriptionRegistry
from tests.helpers.api import (
    API_KEY,
    WEBHOOK_SECRET,
    api_headers,
    interaction,
    signed_webhook,
)
from tests.helpers.fakes import DiscordStub
from tests.helpers.github_payloads import (
    generic_payload,
    issues_payload,
    pull_request_payload,
    push_payload,
    release_payload,
)

PAYLOAD_BUILDERS = {
    "push": push_payload,
    "issues": issues_payload,
    "pull_request": pull_request_payload,
    "release": release_payload,
}


class RelayWorld:
    """Running relay plus the Discord stub it delivers to."""

    def __init__(self) -> None:
        self.registry = SubscriptionRegistry()
        self.discord = DiscordStub()
        self.client = falcon.testing.TestClient(
            create_app(
                AppDependencies(
                    registry=self.registry,
                    relay_config=RelayConfig(
                        webhook_secret=WEBHOOK_SECRET, api_key=API_KEY
                    ),
                    discord=self.discord.client(),
                )
            )
        )
        self.last_result: falcon.testing.Result | None = None

    @property
    def result(self) -> falcon.testing.Result:
        """Return the most recent HTTP result."""
        assert self.last_result is not None, "no request has been made yet"
        return self.last_result


@pytest.fixture
def relay_world() -> RelayWorld:
    """Provision a relay with an empty registry and a Discord stub."""
    return RelayWorld()


@given("a running Meridus relay")
def given_running_relay(relay_world: RelayWorld) -> None:
    """Ensure the relay is available via the test client."""
    assert relay_world.client is not None, "client should be set by fixture"


@given(
    parsers.parse('channel "{channel}" is subscribed to "{repo}" via the slash command')
)
def given_slash_subscription(
    relay_world: RelayWorld, channel: str, repo: str
) -> None:
    """Subscribe through a forwarded ``/subscribe`` interaction."""
    result = relay_world.client.simulate_post(
        "/api/commands",
        json=interaction("subscribe", channel=channel, repo=repo),
        headers=api_headers(),
    )
    assert result.json["type"] == 4, f"unexpected reply: {result.json}"


def _send_webhook(
    relay_world: RelayWorld, event_type: str, repo: str, secret: str
) -> None:
    payload = PAYLOAD_BUILDERS.get(event_type, generic_payload)(repo)
    body, headers = signed_webhook(event_type, payload, secret=secret)
    relay_world.last_result = relay_world.client.simulate_post(
        "/api/webhooks/github", body=body, headers=headers
    )


@when(parsers.parse('GitHub sends a signed "{event_type}" event for "{repo}"'))
def when_signed_webhook(relay_world: RelayWorld, event_type: str, repo: str) -> None:
    """Deliver a webhook signed with the configured secret."""
    _send_webhook(relay_world, event_type, repo, WEBHOOK_SECRET)


@when(
    parsers.parse(
        'GitHub sends a "{event_type}" event for "{repo}" signed with "{secret}"'
    )
)
def when_webhook_with_secret(
    relay_world: RelayWorld, event_type: str, repo: str, secret: str
) -> None:
    """Deliver a webhook signed with an arbitrary secret."""
    _send_webhook(relay_world, event_type, repo, secret)


@then(parsers.parse("the response status is {status:d}"))
def then_response_status(relay_world: RelayWorld, status: int) -> None:
    """Assert the HTTP response status code."""
    actual = relay_world.result.status_code
    assert actual == status, f"expected status {status}, got {actual}"


@then("no notifications are sent")
def then_nothing_sent(relay_world: RelayWorld) -> None:
    """Assert Discord received no message posts."""
    assert relay_world.discord.posted == [], "no channel should be notified"


@then(parsers.parse('the command replies "{content}"'))
def then_command_replies(relay_world: RelayWorld, content: str) -> None:
    """Assert the plain-text content of the last command reply."""
    data = relay_world.result.json["data"]
    assert data.get("content") == content, f"unexpected reply: {data}"
