"""Discord adapter errors."""

from __future__ import annotations


class DiscordAPIError(RuntimeError):
    """Raised when the Discord REST API returns an error response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int, route: str) -> DiscordAPIError:
        """Return an error for a non-2xx HTTP response on ``route``."""
        return cls(f"Discord HTTP {status_code} on {route}", status_code=status_code)

    @classmethod
    def transport_error(cls, route: str, reason: str) -> DiscordAPIError:
        """Return an error for a request that never produced a response."""
        return cls(f"Discord request to {route} failed: {reason}")


class DiscordConfigError(RuntimeError):
    """Raised when Discord adapter configuration is invalid."""

    @classmethod
    def missing_token(cls) -> DiscordConfigError:
        """Return an error when no bot token is configured."""
        return cls("DISCORD_BOT_TOKEN is required for the Discord API")

    @classmethod
    def empty_token(cls) -> DiscordConfigError:
        """Return an error when the provided token is empty."""
        return cls("Discord bot token must be non-empty")

    @classmethod
    def missing_application_id(cls) -> DiscordConfigError:
        """Return an error when command registration lacks an application ID."""
        return cls("DISCORD_APP_ID is required to register slash commands")
