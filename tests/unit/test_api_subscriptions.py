"""Unit tests for the administrative subscription endpoint."""

from __future__ import annotations

import typing as typ

import falcon
import falcon.testing
import pytest

from tests.helpers.api import api_headers

if typ.TYPE_CHECKING:
    from meridus.subscriptions import SubscriptionRegistry

SUBSCRIPTIONS_PATH = "/api/subscriptions"


def _call(
    client: falcon.testing.TestClient,
    body: dict[str, typ.Any],
    headers: dict[str, str] | None = None,
) -> falcon.testing.Result:
    return client.simulate_post(
        SUBSCRIPTIONS_PATH,
        json=body,
        headers=headers if headers is not None else api_headers(),
    )


class TestAuthentication:
    """API key enforcement."""

    @pytest.mark.parametrize(
        "headers", [{}, api_headers("wrong")], ids=["missing", "mismatched"]
    )
    def test_rejects_without_valid_key(
        self,
        api_client: falcon.testing.TestClient,
        registry: SubscriptionRegistry,
        headers: dict[str, str],
    ) -> None:
        """Calls without the shared key are 401 and change nothing."""
        body = {"action": "add", "channelId": "1", "repo": "octo/demo"}

        result = _call(api_client, body, headers)

        assert result.status == falcon.HTTP_401, "expected HTTP 401"
        assert result.json == {"title": "Unauthorized", "description": "Unauthorized"}
        assert len(registry) == 0


class TestActions:
    """Add, remove and list actions."""

    def test_add_returns_subscription(
        self,
        api_client: falcon.testing.TestClient,
        registry: SubscriptionRegistry,
    ) -> None:
        """Adding stores the repository and trimmed, de-duplicated events."""
        result = _call(
            api_client,
            {
                "action": "add",
                "channelId": "1",
                "repo": "octo/demo",
                "events": [" push", "push", "", "issues"],
            },
        )

        assert result.status == falcon.HTTP_200, "expected HTTP 200"
        assert result.json == {
            "success": True,
            "subscription": {"repos": ["octo/demo"], "events": ["push", "issues"]},
        }
        assert registry.get("1") is not None

    def test_add_is_idempotent(self, api_client: falcon.testing.TestClient) -> None:
        """Re-adding a repository does not duplicate it."""
        body = {"action": "add", "channelId": "1", "repo": "octo/demo"}
        _call(api_client, body)

        result = _call(api_client, body)

        assert result.json["subscription"]["repos"] == ["octo/demo"]

    def test_add_without_repo_keeps_filter(
        self,
        api_client: falcon.testing.TestClient,
        registry: SubscriptionRegistry,
    ) -> None:
        """Omitting ``repo`` only merges events."""
        registry.subscribe("1", "octo/demo", ["push"])

        result = _call(
            api_client, {"action": "add", "channelId": "1", "events": ["release"]}
        )

        assert result.json["subscription"] == {
            "repos": ["octo/demo"],
            "events": ["push", "release"],
        }

    def test_remove_repository(
        self,
        api_client: falcon.testing.TestClient,
        registry: SubscriptionRegistry,
    ) -> None:
        """Removing a repository keeps the channel record."""
        registry.subscribe("1", "octo/demo")

        result = _call(
            api_client, {"action": "remove", "channelId": "1", "repo": "octo/demo"}
        )

        assert result.json == {"success": True}
        subscription = registry.get("1")
        assert subscription is not None
        assert subscription.repositories == ()

    def test_remove_channel(
        self,
        api_client: falcon.testing.TestClient,
        registry: SubscriptionRegistry,
    ) -> None:
        """Removing without a repository deletes the record."""
        registry.subscribe("1", "octo/demo")

        _call(api_client, {"action": "remove", "channelId": "1"})

        assert registry.get("1") is None

    def test_list(
        self,
        api_client: falcon.testing.TestClient,
        registry: SubscriptionRegistry,
    ) -> None:
        """Listing returns every channel keyed by identifier."""
        registry.subscribe("1", "octo/demo", ["push"])
        registry.subscribe("2", None)

        result = _call(api_client, {"action": "list"})

        assert result.json == {
            "subscriptions": {
                "1": {"repos": ["octo/demo"], "events": ["push"]},
                "2": {"repos": [], "events": []},
            }
        }


class TestValidation:
    """Malformed requests."""

    def test_unknown_action(self, api_client: falcon.testing.TestClient) -> None:
        """Unknown actions are a 400 naming the field."""
        result = _call(api_client, {"action": "purge", "channelId": "1"})

        assert result.status == falcon.HTTP_400, "expected HTTP 400"
        assert result.json["field"] == "action"

    @pytest.mark.parametrize("action", ["add", "remove"])
    def test_channel_required(
        self, api_client: falcon.testing.TestClient, action: str
    ) -> None:
        """Mutating actions need a non-blank channel."""
        result = _call(api_client, {"action": action, "channelId": "  "})

        assert result.status == falcon.HTTP_400, "expected HTTP 400"
        assert result.json["field"] == "channelId"

    def test_wrong_types(self, api_client: falcon.testing.TestClient) -> None:
        """A body that does not match the request shape is a 400."""
        result = _call(api_client, {"action": "add", "events": "push"})

        assert result.status == falcon.HTTP_400, "expected HTTP 400"
        assert result.json["title"] == "Invalid input"
