"""
Command-line interface and main entry point for cromwell_cleaner.

Handles workflow orchestration and user-facing exit codes.
"""

from __future__ import annotations

import logging
import sys

from .args_parser import config_from_args, parse_args
from .client_factory import create_storage_client
from .errors import CleanerError
from .locator import parse_locator
from .orchestrator import CleanupRun

EXIT_INTERRUPTED = 130


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the cromwell_cleaner CLI."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )
    config = config_from_args(args)

    try:
        locator = parse_locator(args.bucket)
        s3 = create_storage_client(
            locator.scheme,
            endpoint_url=config.endpoint_url,
            max_pool_connections=config.pool_connections,
        )
        summary = CleanupRun(s3, locator, config).run()
    except CleanerError as exc:
        logging.error("%s failed: %s", exc.stage.capitalize(), exc)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted; outstanding deletions may be incomplete.", file=sys.stderr)
        return EXIT_INTERRUPTED

    print(summary.describe(config.dry_run))
    return 0
