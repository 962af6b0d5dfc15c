"""Client for the Meridus website's read-only GitHub listings."""

from .client import DataSourceClient
from .config import DEFAULT_BASE_URL, DataSourceConfig, derive_base_url
from .models import (
    CommitItem,
    Fetched,
    FetchFailed,
    FetchResult,
    IssueItem,
    ListingKind,
    RepositoryItem,
    WebsiteStatus,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "CommitItem",
    "DataSourceClient",
    "DataSourceConfig",
    "Fetched",
    "FetchFailed",
    "FetchResult",
    "IssueItem",
    "ListingKind",
    "RepositoryItem",
    "WebsiteStatus",
    "derive_base_url",
]
