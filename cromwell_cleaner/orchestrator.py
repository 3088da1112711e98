"""
End-to-end cleanup run: verify bucket, list pages, filter, then report or delete.

Pagination runs on the calling thread. Every page is handed to a bounded page
pool so deleting page N overlaps with fetching page N+1, and every dispatched
page is joined before the run reports its summary.
"""

from __future__ import annotations

import logging
import sys
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import TextIO

from botocore.exceptions import BotoCoreError, ClientError

from .config import CleanerConfig
from .deletion import BatchResult, DeletionExecutor
from .errors import BucketNotFound
from .listing import ListingPage, ObjectLister
from .locator import StorageLocator
from .patterns import filter_artifacts

MISSING_BUCKET_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})
DRY_RUN_HEADER = "Would delete the following objects:"


@dataclass
class RunSummary:
    """Counters accumulated across page tasks."""

    pages: int = 0
    listed: int = 0
    matched: int = 0
    deleted: int = 0
    failed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record_page(self, item_count: int) -> None:
        with self._lock:
            self.pages += 1
            self.listed += item_count

    def record_matches(self, count: int) -> None:
        with self._lock:
            self.matched += count

    def record_batch(self, result: BatchResult) -> None:
        with self._lock:
            self.deleted += result.deleted
            self.failed += result.failed

    def describe(self, dry_run: bool) -> str:
        """Human-readable one-line summary."""
        scanned = f"Scanned {self.listed:,} object(s) across {self.pages:,} page(s)"
        if dry_run:
            return f"{scanned}; {self.matched:,} would be deleted."
        text = f"{scanned}; deleted {self.deleted:,} of {self.matched:,} matched object(s)."
        if self.failed:
            text += f" {self.failed:,} deletion(s) failed; see log for details."
        return text


def verify_bucket_exists(s3, bucket: str) -> None:
    """Check that the bucket exists and is reachable.

    Raises:
        BucketNotFound: If the bucket is missing or the check itself fails.
    """
    try:
        s3.head_bucket(Bucket=bucket)
    except ClientError as exc:
        code = str(exc.response.get("Error", {}).get("Code", ""))
        if code in MISSING_BUCKET_CODES:
            raise BucketNotFound(f"Bucket {bucket} does not exist") from exc
        raise BucketNotFound(f"Unable to access bucket {bucket}: {exc}") from exc
    except BotoCoreError as exc:
        raise BucketNotFound(f"Unable to access bucket {bucket}: {exc}") from exc


class CleanupRun:
    """Drive one sweep over a locator."""

    def __init__(
        self,
        s3,
        locator: StorageLocator,
        config: CleanerConfig,
        report: TextIO | None = None,
    ):
        self.s3 = s3
        self.locator = locator
        self.config = config
        self.report = report if report is not None else sys.stdout
        self.summary = RunSummary()
        self._report_lock = threading.Lock()
        self._deleter: DeletionExecutor | None = None

    def _report_matches(self, matched) -> None:
        with self._report_lock:
            for obj in matched:
                print(self.locator.uri_for(obj.name), file=self.report)
            self.report.flush()

    def process_page(self, page: ListingPage) -> None:
        """Filter one page and either report or delete its matches."""
        matched = filter_artifacts(page.items)
        self.summary.record_matches(len(matched))
        if not matched:
            return
        if self.config.dry_run:
            self._report_matches(matched)
            return
        result = self._deleter.delete_batch(matched)
        self.summary.record_batch(result)

    def _dispatch_pages(self, lister: ObjectLister, page_pool: ThreadPoolExecutor) -> list[Future]:
        slots = threading.BoundedSemaphore(self.config.max_pending_pages)
        futures: list[Future] = []
        try:
            for page in lister.pages():
                self.summary.record_page(len(page.items))
                slots.acquire()
                future = page_pool.submit(self.process_page, page)
                future.add_done_callback(lambda _done: slots.release())
                futures.append(future)
        finally:
            wait(futures)
        return futures

    def run(self) -> RunSummary:
        """Execute the sweep and return its summary once every page is processed.

        Raises:
            BucketNotFound: If the bucket check fails.
            BackendUnavailable: If listing fails; pages already dispatched finish first.
        """
        logging.info("Listing objects in bucket: %s", self.locator)
        verify_bucket_exists(self.s3, self.locator.bucket)

        if self.config.dry_run:
            print(DRY_RUN_HEADER, file=self.report)
        else:
            self._deleter = DeletionExecutor(self.s3, max_workers=self.config.max_concurrent_deletes)

        lister = ObjectLister(self.s3, self.locator, page_size=self.config.page_size)
        try:
            with ThreadPoolExecutor(
                max_workers=self.config.max_pending_pages, thread_name_prefix="page"
            ) as page_pool:
                futures = self._dispatch_pages(lister, page_pool)
        finally:
            if self._deleter is not None:
                self._deleter.shutdown()

        for future in futures:
            future.result()
        return self.summary
