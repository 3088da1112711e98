"""
Configuration defaults for cromwell_cleaner.

Performance settings:
- Deletes run on a bounded ThreadPoolExecutor (32 concurrent requests by default)
- Up to 4 listing pages are filtered/deleted while the next page is fetched
- Listing pages request 1000 keys, the backend maximum
"""

from __future__ import annotations

from dataclasses import dataclass

# Concurrency caps
DEFAULT_MAX_CONCURRENT_DELETES: int = 32
DEFAULT_MAX_PENDING_PAGES: int = 4

# Listing
DEFAULT_PAGE_SIZE: int = 1000
MAX_PAGE_SIZE: int = 1000

# Supported locator schemes and the endpoint each talks to (None = boto3 default)
SCHEME_ENDPOINTS: dict[str, str | None] = {
    "gs": "https://storage.googleapis.com",
    "s3": None,
}

# Extra HTTP connections beyond the delete pool, used by bucket checks and listing
LISTING_CONNECTIONS: int = 1

# botocore retries are disabled; every request is attempted exactly once
MAX_REQUEST_ATTEMPTS: int = 1


@dataclass(frozen=True)
class CleanerConfig:
    """Settings for a single cleanup run."""

    dry_run: bool = False
    max_concurrent_deletes: int = DEFAULT_MAX_CONCURRENT_DELETES
    max_pending_pages: int = DEFAULT_MAX_PENDING_PAGES
    page_size: int = DEFAULT_PAGE_SIZE
    endpoint_url: str | None = None

    def __post_init__(self):
        if self.max_concurrent_deletes <= 0:
            raise ValueError("max_concurrent_deletes must be positive")
        if self.max_pending_pages <= 0:
            raise ValueError("max_pending_pages must be positive")
        if not 0 < self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")

    @property
    def pool_connections(self) -> int:
        """HTTP connection pool size: one per delete worker plus the listing thread."""
        return self.max_concurrent_deletes + LISTING_CONNECTIONS


def endpoint_for_scheme(scheme: str, override: str | None = None) -> str | None:
    """Return the endpoint URL for a locator scheme, honouring an explicit override."""
    if override:
        return override
    try:
        return SCHEME_ENDPOINTS[scheme]
    except KeyError:
        raise ValueError(f"Unsupported storage scheme: {scheme}") from None
