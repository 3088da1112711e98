"""
Concurrent deletion of matched objects.

Each object is deleted by its own request; one failure never affects its
siblings and nothing is retried.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Sequence

from botocore.exceptions import BotoCoreError, ClientError

from .config import DEFAULT_MAX_CONCURRENT_DELETES
from .errors import DeleteFailed
from .listing import ObjectRef


@dataclass(frozen=True)
class DeletionOutcome:
    """Result of deleting a single object."""

    object: ObjectRef
    error: DeleteFailed | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchResult:
    """Counts for one delete batch."""

    attempted: int = 0
    failed: int = 0

    @property
    def deleted(self) -> int:
        return self.attempted - self.failed


class DeletionExecutor:
    """Issue delete requests on a bounded worker pool shared by all batches."""

    def __init__(self, s3, max_workers: int = DEFAULT_MAX_CONCURRENT_DELETES):
        self.s3 = s3
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="delete")

    def __enter__(self) -> DeletionExecutor:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def shutdown(self) -> None:
        """Wait for in-flight deletes and release the worker threads."""
        self._pool.shutdown(wait=True)

    def delete_object(self, obj: ObjectRef) -> DeletionOutcome:
        """Delete one object, capturing any backend failure in the outcome."""
        try:
            self.s3.delete_object(Bucket=obj.bucket, Key=obj.name)
        except (ClientError, BotoCoreError) as exc:
            failure = DeleteFailed(obj.bucket, obj.name, exc)
            logging.error("Error deleting object %s/%s: %s", obj.bucket, obj.name, exc)
            return DeletionOutcome(object=obj, error=failure)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            failure = DeleteFailed(obj.bucket, obj.name, exc)
            logging.exception("Unexpected error deleting object %s/%s", obj.bucket, obj.name)
            return DeletionOutcome(object=obj, error=failure)
        logging.debug("Deleted %s/%s", obj.bucket, obj.name)
        return DeletionOutcome(object=obj)

    def delete_batch(self, objects: Sequence[ObjectRef]) -> BatchResult:
        """Delete every object in the batch and wait for all requests to finish.

        Callers must pass objects that already matched the artifact pattern.
        Per-object failures are logged and counted, never raised.
        """
        if not objects:
            return BatchResult()
        futures = [self._pool.submit(self.delete_object, obj) for obj in objects]
        failed = 0
        for future in as_completed(futures):
            if not future.result().ok:
                failed += 1
        return BatchResult(attempted=len(futures), failed=failed)
