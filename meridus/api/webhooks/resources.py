"""GitHub webhook receiver.

``POST /api/webhooks/github`` authenticates the raw body, renders the event
and relays it to every subscribed channel. Once a webhook is admitted the
response is always ``200`` with a ``received`` acknowledgement; rendering
and delivery problems are reported in the body and logged, never surfaced
as HTTP errors.

Usage
-----
Register the resource on the Falcon app::

    app.add_route(
        "/api/webhooks/github",
        GitHubWebhookResource(relay_config, dispatcher),
    )

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

import msgspec

from meridus.api.auth import SIGNATURE_HEADER, verify_signature
from meridus.api.errors import AuthenticationError, InvalidInputError
from meridus.events import EventPayloadError, render
from meridus.routing.observability import RelayEventLogger

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from meridus.config import RelayConfig
    from meridus.routing.dispatch import DispatchResult, NotificationDispatcher

__all__ = ["GitHubWebhookResource"]

EVENT_HEADER = "X-GitHub-Event"
DELIVERY_HEADER = "X-GitHub-Delivery"


def _acknowledgement(
    event_type: str, result: DispatchResult | None = None
) -> dict[str, typ.Any]:
    return {
        "received": True,
        "event": event_type,
        "delivered": list(result.delivered) if result is not None else [],
        "failed": list(result.failed) if result is not None else [],
    }


def _decode_payload(raw: bytes) -> dict[str, typ.Any]:
    try:
        payload = msgspec.json.decode(raw)
    except msgspec.DecodeError as exc:
        msg = f"Request body is not valid JSON: {exc}"
        raise InvalidInputError(msg) from exc
    if not isinstance(payload, dict):
        msg = "Request body must be a JSON object"
        raise InvalidInputError(msg)
    return payload


class GitHubWebhookResource:
    """Receive GitHub webhooks and relay them to subscribed channels."""

    def __init__(
        self,
        config: RelayConfig,
        dispatcher: NotificationDispatcher,
        *,
        event_logger: RelayEventLogger | None = None,
    ) -> None:
        """Configure the resource with its secret and dispatcher."""
        self._config = config
        self._dispatcher = dispatcher
        self._events = event_logger or RelayEventLogger()

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle POST /api/webhooks/github.

        Parameters
        ----------
        req
            Falcon request carrying the signed webhook body.
        resp
            Falcon response populated with the acknowledgement.

        Raises
        ------
        AuthenticationError
            If a webhook secret is configured and the signature is missing
            or wrong.
        InvalidInputError
            If the event header is missing or the body is not a JSON object.

        """
        raw = await req.stream.read()
        event_type = req.get_header(EVENT_HEADER) or ""
        if not verify_signature(
            self._config.webhook_secret, raw, req.get_header(SIGNATURE_HEADER)
        ):
            self._events.log_webhook_rejected(
                event_type=event_type or "unknown", reason="invalid_signature"
            )
            raise AuthenticationError.invalid_signature()
        if not event_type:
            msg = "Missing GitHub event type header"
            raise InvalidInputError(msg, field=EVENT_HEADER)

        payload = _decode_payload(raw)
        self._events.log_webhook_received(
            event_type=event_type, delivery_id=req.get_header(DELIVERY_HEADER)
        )

        resp.status = HTTPStatus.OK
        try:
            notification = render(event_type, payload)
        except EventPayloadError as exc:
            self._events.log_webhook_rejected(event_type=event_type, reason=str(exc))
            resp.media = {**_acknowledgement(event_type), "error": str(exc)}
            return

        if notification is None:
            self._events.log_webhook_dropped(event_type=event_type)
            resp.media = _acknowledgement(event_type)
            return

        result = await self._dispatcher.dispatch(notification)
        resp.media = _acknowledgement(event_type, result)
