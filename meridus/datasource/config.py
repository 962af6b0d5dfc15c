"""Configuration for the Meridus website data source."""

from __future__ import annotations

import dataclasses as dc
import os

from meridus.config import parse_timeout

DEFAULT_BASE_URL = "https://www.meridusdev.in.th"
_OAUTH_CALLBACK_SUFFIX = "/api/auth/callback?service=discord"


def derive_base_url(meridus_url: str | None) -> str:
    """Return the website origin for ``MERIDUS_URL``.

    Deployments commonly set ``MERIDUS_URL`` to the Discord OAuth callback;
    the callback path is stripped so API paths can be appended.

    Examples
    --------
    >>> derive_base_url("https://example.test/api/auth/callback?service=discord")
    'https://example.test'
    >>> derive_base_url(None)
    'https://www.meridusdev.in.th'

    """
    if not meridus_url:
        return DEFAULT_BASE_URL
    return meridus_url.replace(_OAUTH_CALLBACK_SUFFIX, "").rstrip("/")


@dc.dataclass(frozen=True, slots=True)
class DataSourceConfig:
    """Connection details for the website's GitHub listing API."""

    base_url: str
    api_key: str
    timeout_s: float = 10.0

    @classmethod
    def from_env(cls) -> DataSourceConfig | None:
        """Build configuration from ``MERIDUS_URL`` and ``MERIDUS_API_KEY``.

        Returns
        -------
        DataSourceConfig | None
            ``None`` when either variable is unset, which disables the
            listing commands and the website status probe.

        """
        url = os.environ.get("MERIDUS_URL", "").strip()
        api_key = os.environ.get("MERIDUS_API_KEY", "").strip()
        if not url or not api_key:
            return None
        return cls(
            base_url=derive_base_url(url),
            api_key=api_key,
            timeout_s=parse_timeout("MERIDUS_HTTP_TIMEOUT_S", 10.0),
        )
