"""Server-to-server subscription management.

``POST /api/subscriptions`` accepts ``{"action": "add" | "remove" | "list",
"channelId": ..., "repo": ..., "events": [...]}`` authenticated by the
shared ``x-api-key``.
"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

import msgspec

from meridus.api.auth import require_api_key
from meridus.api.errors import InvalidInputError
from meridus.logging import get_logger, log_info

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from meridus.config import RelayConfig
    from meridus.subscriptions import Subscription, SubscriptionRegistry

__all__ = ["SubscriptionRequest", "SubscriptionsResource"]

logger = get_logger(__name__)


class SubscriptionRequest(msgspec.Struct, kw_only=True, frozen=True):
    """Body of an administrative subscription call."""

    action: str
    channel_id: str | None = msgspec.field(default=None, name="channelId")
    repo: str | None = None
    events: list[str] | None = None

    def required_channel(self) -> str:
        """Return the trimmed channel identifier.

        Raises
        ------
        InvalidInputError
            If ``channelId`` is absent or blank.

        """
        channel_id = (self.channel_id or "").strip()
        if not channel_id:
            msg = f"channelId is required for {self.action}"
            raise InvalidInputError(msg, field="channelId")
        return channel_id

    def repository(self) -> str | None:
        """Return the trimmed repository, or ``None`` when blank."""
        return (self.repo or "").strip() or None

    def event_types(self) -> tuple[str, ...]:
        """Return trimmed, non-blank, de-duplicated event types."""
        trimmed = (event.strip() for event in self.events or ())
        return tuple(dict.fromkeys(event for event in trimmed if event))


def serialize_subscription(subscription: Subscription) -> dict[str, list[str]]:
    """Return the wire shape of one subscription."""
    return {
        "repos": list(subscription.repositories),
        "events": list(subscription.events),
    }


class SubscriptionsResource:
    """Add, remove and list subscriptions on behalf of the website."""

    def __init__(self, config: RelayConfig, registry: SubscriptionRegistry) -> None:
        """Configure the resource with its API key and registry."""
        self._config = config
        self._registry = registry

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle POST /api/subscriptions.

        Raises
        ------
        AuthenticationError
            If ``x-api-key`` is missing, wrong or no key is configured.
        InvalidInputError
            If the body is malformed, lacks a required ``channelId`` or names
            an unknown action.

        """
        require_api_key(req, self._config.api_key)
        raw = await req.stream.read()
        try:
            request = msgspec.json.decode(raw, type=SubscriptionRequest)
        except msgspec.DecodeError as exc:
            msg = f"Invalid subscription request: {exc}"
            raise InvalidInputError(msg) from exc

        match request.action:
            case "add":
                resp.media = self._add(request)
            case "remove":
                resp.media = self._remove(request)
            case "list":
                resp.media = {"subscriptions": self._list()}
            case _:
                msg = f"Unknown action: {request.action}"
                raise InvalidInputError(msg, field="action")
        resp.status = HTTPStatus.OK

    def _list(self) -> dict[str, dict[str, list[str]]]:
        return {
            channel_id: serialize_subscription(subscription)
            for channel_id, subscription in self._registry.list_all().items()
        }

    def _add(self, request: SubscriptionRequest) -> dict[str, typ.Any]:
        channel_id = request.required_channel()
        subscription = self._registry.subscribe(
            channel_id, request.repository(), request.event_types()
        )
        log_info(
            logger,
            "Subscription updated via API: channel=%s repo=%s",
            channel_id,
            request.repository(),
        )
        return {"success": True, "subscription": serialize_subscription(subscription)}

    def _remove(self, request: SubscriptionRequest) -> dict[str, typ.Any]:
        channel_id = request.required_channel()
        repository = request.repository()
        if repository is None:
            removed = self._registry.remove_subscription(channel_id)
        else:
            removed = self._registry.remove_repository(channel_id, repository)
        log_info(
            logger,
            "Subscription removal via API: channel=%s repo=%s existed=%s",
            channel_id,
            repository,
            removed,
        )
        return {"success": True}
