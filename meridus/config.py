"""Boundary configuration for the Meridus HTTP surface.

``RelayConfig`` carries the shared secrets the HTTP boundary checks before a
request reaches the routing core.

Usage
-----
>>> import os
>>> os.environ["MERIDUS_API_KEY"] = "s3cret"
>>> RelayConfig.from_env().api_key
's3cret'

"""

from __future__ import annotations

import dataclasses as dc
import os


def _optional_env(name: str) -> str | None:
    """Return the stripped value of ``name`` or ``None`` when blank."""
    value = os.environ.get(name, "").strip()
    return value or None


@dc.dataclass(frozen=True, slots=True)
class RelayConfig:
    """Secrets used to authenticate inbound requests.

    Attributes
    ----------
    webhook_secret
        Shared secret for GitHub's ``X-Hub-Signature-256`` HMAC. When
        ``None`` the signature check is skipped, matching GitHub webhooks
        configured without a secret.
    api_key
        Shared key expected in the ``x-api-key`` header of administrative
        and command calls. When ``None`` those endpoints reject every
        request.

    """

    webhook_secret: str | None = None
    api_key: str | None = None

    @classmethod
    def from_env(cls) -> RelayConfig:
        """Read ``GITHUB_WEBHOOK_SECRET`` and ``MERIDUS_API_KEY``."""
        return cls(
            webhook_secret=_optional_env("GITHUB_WEBHOOK_SECRET"),
            api_key=_optional_env("MERIDUS_API_KEY"),
        )


def parse_timeout(env_var: str, default: float) -> float:
    """Read a positive float number of seconds from ``env_var``.

    Raises
    ------
    ValueError
        If the variable is set to something that is not a positive number.

    """
    raw = os.environ.get(env_var, "")
    if not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        msg = f"{env_var} must be a number of seconds, got: {raw!r}"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = f"{env_var} must be positive, got: {value}"
        raise ValueError(msg)
    return value


__all__ = ["RelayConfig", "parse_timeout"]
