"""Process-wide runtime status shared by the HTTP surface and commands."""

from __future__ import annotations

import dataclasses as dc
import time
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True)
class ServiceState:
    """Start time and Discord connectivity of the running service.

    Attributes
    ----------
    clock
        Monotonic clock in seconds; injectable for tests.
    started_at
        Clock reading when the service started.
    connected
        Whether the bot token has been verified against Discord.
    bot_tag
        Bot account name once verified.

    """

    clock: cabc.Callable[[], float] = time.monotonic
    started_at: float = dc.field(default=-1.0)
    connected: bool = False
    bot_tag: str | None = None

    def __post_init__(self) -> None:
        """Stamp the start time from ``clock`` unless one was supplied."""
        if self.started_at < 0:
            self.started_at = self.clock()

    @property
    def uptime_seconds(self) -> int:
        """Return whole seconds since start."""
        return int(self.clock() - self.started_at)

    @property
    def uptime_ms(self) -> int:
        """Return whole milliseconds since start."""
        return int((self.clock() - self.started_at) * 1000)

    def mark_connected(self, bot_tag: str) -> None:
        """Record a successful token verification."""
        self.connected = True
        self.bot_tag = bot_tag

    def mark_disconnected(self) -> None:
        """Record that Discord is unreachable or unconfigured."""
        self.connected = False
