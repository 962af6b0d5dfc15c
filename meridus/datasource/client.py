"""HTTP client for the Meridus website's GitHub listing API.

Every call returns an explicit result instead of raising, so the command
processor can turn each failure mode into a reply.
"""

from __future__ import annotations

import typing as typ

import httpx
import msgspec

from meridus.logging import get_logger, log_warning

from .models import (
    ITEM_TYPES,
    Fetched,
    FetchFailed,
    FetchResult,
    ListingKind,
    WebsiteStatus,
)

if typ.TYPE_CHECKING:
    from .config import DataSourceConfig

logger = get_logger(__name__)


def _reason(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class DataSourceClient:
    """Read-only client for ``/api/github/*`` and ``/api/meridus/status``."""

    def __init__(
        self,
        config: DataSourceConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided website configuration."""
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=config.timeout_s,
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def _get(
        self, path: str, params: dict[str, str] | None = None
    ) -> httpx.Response:
        return await self._client.get(
            f"{self._config.base_url}{path}",
            params=params,
            headers={"x-api-key": self._config.api_key},
        )

    async def fetch_listing(
        self, kind: ListingKind, *, repo: str | None = None
    ) -> FetchResult:
        """Fetch one listing, optionally filtered to a repository.

        Parameters
        ----------
        kind
            Which listing to read.
        repo
            Optional ``owner/name`` filter sent as the ``repo`` parameter.

        Returns
        -------
        Fetched | FetchFailed
            Decoded items, or the reason the fetch failed.

        """
        params = {"repo": repo} if repo else None
        try:
            response = await self._get(f"/api/github/{kind}", params)
        except httpx.HTTPError as exc:
            log_warning(logger, "Fetching %s failed: %s", kind, _reason(exc))
            return FetchFailed(_reason(exc))

        if not response.is_success:
            log_warning(
                logger, "Fetching %s returned HTTP %d", kind, response.status_code
            )
            return FetchFailed(
                f"HTTP {response.status_code}", status_code=response.status_code
            )

        try:
            raw = msgspec.json.decode(response.content)
        except msgspec.DecodeError as exc:
            return FetchFailed(f"Invalid JSON from /api/github/{kind}: {exc}")
        if not isinstance(raw, list):
            return FetchFailed(f"Expected a JSON array from /api/github/{kind}")
        try:
            items = msgspec.convert(raw, list[ITEM_TYPES[kind]])
        except msgspec.ValidationError as exc:
            return FetchFailed(f"Unexpected {kind} item shape: {exc}")
        return Fetched(items=tuple(items), total=len(items))

    async def fetch_status(self) -> WebsiteStatus:
        """Read the website's own status document."""
        try:
            response = await self._get("/api/meridus/status")
        except httpx.HTTPError as exc:
            return WebsiteStatus(error=_reason(exc))
        if not response.is_success:
            return WebsiteStatus(error=f"HTTP {response.status_code}")
        try:
            payload = msgspec.json.decode(response.content)
        except msgspec.DecodeError as exc:
            return WebsiteStatus(error=f"Invalid JSON: {exc}")
        if not isinstance(payload, dict):
            return WebsiteStatus(error="Expected a JSON object")
        return WebsiteStatus(payload=payload)
