"""
Error types for cromwell_cleaner.

Fatal errors carry the stage that failed so the CLI can name it.
"""

from __future__ import annotations


class CleanerError(RuntimeError):
    """Base class for fatal cleaner errors."""

    stage = "run"


class InvalidLocator(CleanerError, ValueError):
    """Raised when the storage locator string is malformed."""

    stage = "parse"


class BucketNotFound(CleanerError):
    """Raised when the target bucket is missing or cannot be checked."""

    stage = "bucket check"


class BackendUnavailable(CleanerError):
    """Raised when the object listing call fails."""

    stage = "listing"


class DeleteFailed(RuntimeError):
    """Describes a single object deletion failure. Never propagated past the executor."""

    def __init__(self, bucket: str, key: str, cause: Exception):
        super().__init__(f"Failed to delete {bucket}/{key}: {cause}")
        self.bucket = bucket
        self.key = key
        self.cause = cause
