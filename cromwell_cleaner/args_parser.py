"""
Argument parsing for the cromwell_cleaner CLI.

Handles command-line argument definition, parsing, and validation.
"""

from __future__ import annotations

import argparse

from .config import (
    DEFAULT_MAX_CONCURRENT_DELETES,
    DEFAULT_MAX_PENDING_PAGES,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    CleanerConfig,
)


def add_target_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the locator and action arguments."""
    parser.add_argument(
        "--bucket",
        "-b",
        required=True,
        metavar="gs:// path",
        help="The bucket path to delete files in, e.g. gs://my-bucket/cromwell-executions/",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Dry run, don't actually delete any files.",
    )


def add_tuning_arguments(parser: argparse.ArgumentParser) -> None:
    """Add concurrency and backend arguments."""
    parser.add_argument(
        "--max-concurrent-deletes",
        type=int,
        default=DEFAULT_MAX_CONCURRENT_DELETES,
        metavar="N",
        help=f"Maximum delete requests in flight (default: {DEFAULT_MAX_CONCURRENT_DELETES}).",
    )
    parser.add_argument(
        "--max-pending-pages",
        type=int,
        default=DEFAULT_MAX_PENDING_PAGES,
        metavar="N",
        help=f"Maximum listing pages being processed at once (default: {DEFAULT_MAX_PENDING_PAGES}).",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        metavar="N",
        help=f"Objects requested per listing call (default: {DEFAULT_PAGE_SIZE}).",
    )
    parser.add_argument(
        "--endpoint-url",
        help="Override the storage endpoint (default depends on the path scheme).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")


def _validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate parsed arguments."""
    if args.max_concurrent_deletes <= 0:
        parser.error("--max-concurrent-deletes must be positive.")
    if args.max_pending_pages <= 0:
        parser.error("--max-pending-pages must be positive.")
    if not 0 < args.page_size <= MAX_PAGE_SIZE:
        parser.error(f"--page-size must be between 1 and {MAX_PAGE_SIZE}.")


def build_parser() -> argparse.ArgumentParser:
    """Create the ArgumentParser for cromwell_cleaner."""
    parser = argparse.ArgumentParser(
        prog="cromwell-cleaner",
        description="Deletes extraneous Cromwell files from a specified object storage path.",
    )
    add_target_arguments(parser)
    add_tuning_arguments(parser)
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse and validate command-line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate_args(args, parser)
    return args


def config_from_args(args: argparse.Namespace) -> CleanerConfig:
    """Build the run configuration from parsed arguments."""
    return CleanerConfig(
        dry_run=args.dry_run,
        max_concurrent_deletes=args.max_concurrent_deletes,
        max_pending_pages=args.max_pending_pages,
        page_size=args.page_size,
        endpoint_url=args.endpoint_url,
    )
