"""Request authentication checks applied before the routing core.

GitHub signs webhook bodies with ``X-Hub-Signature-256``; server-to-server
callers present a shared ``x-api-key``. Both comparisons are constant-time.
"""

from __future__ import annotations

import hashlib
import hmac
import typing as typ

from .errors import AuthenticationError

if typ.TYPE_CHECKING:
    from falcon.asgi import Request

SIGNATURE_HEADER = "X-Hub-Signature-256"
API_KEY_HEADER = "x-api-key"
_SIGNATURE_PREFIX = "sha256="


def compute_signature(secret: str, body: bytes) -> str:
    """Return the ``sha256=<hex>`` HMAC GitHub would send for ``body``."""
    digest = hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()
    return f"{_SIGNATURE_PREFIX}{digest}"


def verify_signature(secret: str | None, body: bytes, header: str | None) -> bool:
    """Return True when ``header`` signs ``body`` with ``secret``.

    With no secret configured every body is admitted, mirroring GitHub
    webhooks set up without one.
    """
    if secret is None:
        return True
    if not header:
        return False
    return hmac.compare_digest(compute_signature(secret, body), header)


def api_key_matches(expected: str | None, provided: str | None) -> bool:
    """Return True when ``provided`` equals the configured key.

    Fails closed: with no key configured nothing matches.
    """
    if not expected or not provided:
        return False
    return hmac.compare_digest(expected.encode(), provided.encode())


def require_api_key(req: Request, expected: str | None) -> None:
    """Raise :class:`AuthenticationError` unless the request carries the key."""
    if not api_key_matches(expected, req.get_header(API_KEY_HEADER)):
        raise AuthenticationError.invalid_api_key()
