"""Unit tests for runtime service state."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from meridus.state import ServiceState
    from tests.helpers.fakes import FakeClock


def test_uptime_tracks_clock(
    service_state: ServiceState, fake_clock: FakeClock
) -> None:
    """Uptime is measured from construction."""
    fake_clock.advance(1.5)

    assert service_state.uptime_seconds == 1
    assert service_state.uptime_ms == 1500


def test_connectivity_transitions(service_state: ServiceState) -> None:
    """The bot starts disconnected and records its tag when verified."""
    assert service_state.connected is False

    service_state.mark_connected("meridus")
    assert service_state.connected is True
    assert service_state.bot_tag == "meridus"

    service_state.mark_disconnected()
    assert service_state.connected is False
