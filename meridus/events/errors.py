"""Errors raised while classifying GitHub webhook payloads."""

from __future__ import annotations


class EventPayloadError(ValueError):
    """Raised when a payload for a known event type has an unexpected shape."""

    def __init__(self, event_type: str, reason: str) -> None:
        """Initialise with the event type and the decoding failure reason."""
        self.event_type = event_type
        self.reason = reason
        super().__init__(f"Malformed {event_type} payload: {reason}")

    @classmethod
    def invalid(cls, event_type: str, reason: str) -> EventPayloadError:
        """Return an error for a payload that failed typed decoding."""
        return cls(event_type, reason)
