#!/usr/bin/env python3
"""
Delete extraneous Cromwell intermediate files from an object storage path.

Matches <uuid>/call-<name>/shard-<n>/ scripts, return codes, localization
scripts and stdout/stderr logs under the given gs:// (or s3://) prefix.

This is a thin wrapper around the cromwell_cleaner package.
"""
from __future__ import annotations

from cromwell_cleaner.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
