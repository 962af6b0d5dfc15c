"""Exceptions raised by API resources and the handlers that render them.

Both handlers answer with a ``title``/``description`` JSON body.

Usage
-----
The app factory wires them up::

    from meridus.api.errors import (
        AuthenticationError,
        InvalidInputError,
        handle_authentication_error,
        handle_invalid_input,
    )

    app.add_error_handler(AuthenticationError, handle_authentication_error)
    app.add_error_handler(InvalidInputError, handle_invalid_input)

"""

from __future__ import annotations

import typing as typ

import falcon

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = [
    "AuthenticationError",
    "InvalidInputError",
    "handle_authentication_error",
    "handle_invalid_input",
]


class AuthenticationError(Exception):
    """Raised when a request fails its signature or API key check.

    Attributes
    ----------
    reason
        Human-readable description of the failed check.

    """

    def __init__(self, reason: str) -> None:
        """Initialize with the reason the request was rejected."""
        self.reason = reason
        super().__init__(reason)

    @classmethod
    def invalid_signature(cls) -> AuthenticationError:
        """Return an error for a webhook whose HMAC does not verify."""
        return cls("Invalid signature")

    @classmethod
    def invalid_api_key(cls) -> AuthenticationError:
        """Return an error for a missing or mismatched ``x-api-key``."""
        return cls("Unauthorized")


class InvalidInputError(Exception):
    """A request body, header or option the relay refuses to act on.

    Resources raise this for input they reject on purpose; anything else
    escaping a responder is a bug and surfaces as a 500.

    Attributes
    ----------
    reason
        What was wrong with the input.
    field
        Offending body field or header, when one can be named.

    """

    def __init__(self, reason: str, *, field: str | None = None) -> None:
        """Record ``reason`` and, optionally, the offending ``field``."""
        self.reason = reason
        self.field = field
        super().__init__(reason if field is None else f"{field}: {reason}")

    def to_media(self) -> dict[str, str]:
        """Return the JSON error body for this rejection."""
        media = {"title": "Invalid input", "description": self.reason}
        if self.field is not None:
            media["field"] = self.field
        return media


async def handle_authentication_error(
    _req: Request,
    resp: Response,
    ex: AuthenticationError,
    _params: dict[str, typ.Any],
) -> None:
    """Answer a failed credential check with 401."""
    resp.status = falcon.HTTP_401
    resp.media = {"title": "Unauthorized", "description": ex.reason}


async def handle_invalid_input(
    _req: Request,
    resp: Response,
    ex: InvalidInputError,
    _params: dict[str, typ.Any],
) -> None:
    """Answer rejected input with 400 and the body from ``ex.to_media()``."""
    resp.status = falcon.HTTP_400
    resp.media = ex.to_media()
