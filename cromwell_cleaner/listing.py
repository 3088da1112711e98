"""
Paginated object listing under a storage locator.

ObjectLister walks ``list_objects_v2`` with an explicit continuation token so
callers can act on each page as soon as it arrives.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from botocore.exceptions import BotoCoreError, ClientError

from .config import DEFAULT_PAGE_SIZE
from .errors import BackendUnavailable

if TYPE_CHECKING:
    from .locator import StorageLocator


@dataclass(frozen=True)
class ObjectRef:
    """Identity of a single object: enough to delete it."""

    bucket: str
    name: str


@dataclass(frozen=True)
class ListingPage:
    """One page of listing results."""

    items: tuple[ObjectRef, ...]
    next_page_token: str | None = None


class ObjectLister:
    """Enumerate every object under a locator, one page at a time.

    The lister is Active until a response arrives without a continuation
    token, after which it is Exhausted and yields nothing further. Empty pages
    do not end the listing on their own.
    """

    def __init__(self, s3, locator: StorageLocator, page_size: int = DEFAULT_PAGE_SIZE):
        self.s3 = s3
        self.locator = locator
        self.page_size = page_size
        self._page_token: str | None = None
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """True once the final page has been fetched."""
        return self._exhausted

    def _request_kwargs(self) -> dict:
        kwargs = {
            "Bucket": self.locator.bucket,
            "Prefix": self.locator.prefix,
            "MaxKeys": self.page_size,
        }
        if self._page_token is not None:
            kwargs["ContinuationToken"] = self._page_token
        return kwargs

    def _get_page_contents(self, response: dict) -> list[dict]:
        """Extract object listings from a response, validating key counts."""
        contents = response.get("Contents")
        key_count = response.get("KeyCount")
        if contents is None:
            if key_count not in (None, 0):
                raise BackendUnavailable(
                    f"list_objects_v2 missing Contents while reporting {key_count} keys"
                    f" for bucket {self.locator.bucket}"
                )
            return []
        return contents

    def fetch_page(self) -> ListingPage:
        """Fetch the next page and advance the cursor.

        Raises:
            BackendUnavailable: If the listing call fails or the lister is exhausted.
        """
        if self._exhausted:
            raise BackendUnavailable(f"Listing of {self.locator} is already exhausted")
        try:
            response = self.s3.list_objects_v2(**self._request_kwargs())
        except (ClientError, BotoCoreError) as exc:
            raise BackendUnavailable(f"Failed to list objects in {self.locator}: {exc}") from exc

        items = tuple(
            ObjectRef(bucket=self.locator.bucket, name=obj["Key"])
            for obj in self._get_page_contents(response)
        )
        next_token = response.get("NextContinuationToken")
        page = ListingPage(items=items, next_page_token=next_token)

        if next_token:
            self._page_token = next_token
        else:
            self._page_token = None
            self._exhausted = True
        logging.debug(
            "Listed %d object(s) from %s (more pages: %s)", len(items), self.locator, not self._exhausted
        )
        return page

    def pages(self) -> Iterator[ListingPage]:
        """Yield pages until the backend stops returning a continuation token."""
        while not self._exhausted:
            yield self.fetch_page()
