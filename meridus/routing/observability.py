"""Structured observability events for webhook relaying.

Events are emitted as ``[event.type] key=value`` log lines so they can be
parsed by log aggregators.

Usage
-----
>>> event_logger = RelayEventLogger()
>>> event_logger.log_webhook_received(event_type="push", delivery_id="abc")

"""

from __future__ import annotations

import enum
import typing as typ

from meridus.logging import get_logger, log_error, log_info, log_warning

if typ.TYPE_CHECKING:
    from .dispatch import DispatchResult

logger = get_logger(__name__)


class RelayEventType(enum.StrEnum):
    """Structured log event types for the relay pipeline."""

    WEBHOOK_RECEIVED = "relay.webhook.received"
    WEBHOOK_REJECTED = "relay.webhook.rejected"
    WEBHOOK_DROPPED = "relay.webhook.dropped"
    DELIVERY_SUCCEEDED = "relay.delivery.succeeded"
    DELIVERY_FAILED = "relay.delivery.failed"
    DISPATCH_COMPLETED = "relay.dispatch.completed"


class RelayEventLogger:
    """Emit structured relay events via femtologging."""

    def log_webhook_received(
        self, *, event_type: str, delivery_id: str | None
    ) -> None:
        """Log an authenticated webhook ahead of rendering."""
        log_info(
            logger,
            "[%s] event_type=%s delivery_id=%s",
            RelayEventType.WEBHOOK_RECEIVED,
            event_type,
            delivery_id,
        )

    def log_webhook_rejected(self, *, event_type: str, reason: str) -> None:
        """Log a webhook whose payload could not be decoded or verified."""
        log_warning(
            logger,
            "[%s] event_type=%s reason=%s",
            RelayEventType.WEBHOOK_REJECTED,
            event_type,
            reason,
        )

    def log_webhook_dropped(self, *, event_type: str) -> None:
        """Log a webhook that carried no repository to route on."""
        log_info(
            logger,
            "[%s] event_type=%s reason=no_repository",
            RelayEventType.WEBHOOK_DROPPED,
            event_type,
        )

    def log_delivery_succeeded(
        self, *, channel_id: str, event_type: str, repository: str
    ) -> None:
        """Log a notification posted to one channel."""
        log_info(
            logger,
            "[%s] channel_id=%s event_type=%s repository=%s",
            RelayEventType.DELIVERY_SUCCEEDED,
            channel_id,
            event_type,
            repository,
        )

    def log_delivery_failed(
        self,
        *,
        channel_id: str,
        event_type: str,
        repository: str,
        error: BaseException,
    ) -> None:
        """Log a delivery failure for one channel.

        Parameters
        ----------
        channel_id
            Channel the sink failed to post to.
        event_type
            GitHub event type being relayed.
        repository
            Source repository of the event.
        error
            Exception raised by the sink.

        """
        log_error(
            logger,
            "[%s] channel_id=%s event_type=%s repository=%s "
            "error_type=%s error=%s",
            RelayEventType.DELIVERY_FAILED,
            channel_id,
            event_type,
            repository,
            type(error).__name__,
            error,
            exc_info=error,
        )

    def log_dispatch_completed(
        self, *, event_type: str, repository: str, result: DispatchResult
    ) -> None:
        """Log the per-event fan-out summary."""
        log_info(
            logger,
            "[%s] event_type=%s repository=%s matched=%d delivered=%d "
            "failed=%d skipped=%d",
            RelayEventType.DISPATCH_COMPLETED,
            event_type,
            repository,
            result.matched,
            len(result.delivered),
            len(result.failed),
            len(result.skipped),
        )
