"""
Cromwell intermediate artifact cleaner.

Scan an object-storage prefix for the scripts, return codes and log streams a
Cromwell execution leaves behind and delete them (or report them in dry-run mode).
"""

from . import args_parser, client_factory, config, deletion, errors, listing, locator, orchestrator, patterns
from .errors import BackendUnavailable, BucketNotFound, CleanerError, DeleteFailed, InvalidLocator
from .listing import ListingPage, ObjectLister, ObjectRef
from .locator import StorageLocator, parse_locator
from .orchestrator import CleanupRun, RunSummary, verify_bucket_exists
from .patterns import filter_artifacts, is_intermediate_artifact

__all__ = [
    "BackendUnavailable",
    "BucketNotFound",
    "CleanerError",
    "CleanupRun",
    "DeleteFailed",
    "InvalidLocator",
    "ListingPage",
    "ObjectLister",
    "ObjectRef",
    "RunSummary",
    "StorageLocator",
    "args_parser",
    "client_factory",
    "config",
    "deletion",
    "errors",
    "filter_artifacts",
    "is_intermediate_artifact",
    "listing",
    "locator",
    "orchestrator",
    "parse_locator",
    "patterns",
    "verify_bucket_exists",
]
