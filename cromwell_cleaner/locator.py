"""
Storage locator parsing.

Turns a ``gs://bucket/prefix`` (or ``s3://``) string into a bucket/prefix pair.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import SCHEME_ENDPOINTS
from .errors import InvalidLocator

SCHEME_SEPARATOR = "://"


@dataclass(frozen=True)
class StorageLocator:
    """Bucket and key prefix a run is scoped to."""

    scheme: str
    bucket: str
    prefix: str

    def uri_for(self, name: str) -> str:
        """Render an object name in this locator's bucket as a URI."""
        return f"{self.scheme}{SCHEME_SEPARATOR}{self.bucket}/{name}"

    def __str__(self) -> str:
        return self.uri_for(self.prefix)


def _split_scheme(text: str) -> tuple[str, str]:
    for scheme in SCHEME_ENDPOINTS:
        marker = f"{scheme}{SCHEME_SEPARATOR}"
        if text.startswith(marker):
            return scheme, text[len(marker) :]
    expected = " or ".join(f"{scheme}{SCHEME_SEPARATOR}" for scheme in SCHEME_ENDPOINTS)
    raise InvalidLocator(f"Invalid path format, no {expected} prefix: {text!r}")


def parse_locator(text: str) -> StorageLocator:
    """Parse ``scheme://bucket/prefix`` into a StorageLocator.

    The prefix is kept verbatim, including any trailing separator.

    Raises:
        InvalidLocator: If the scheme prefix is missing, no folder is given,
            or the bucket name is empty.
    """
    scheme, remainder = _split_scheme(text)
    bucket, sep, prefix = remainder.partition("/")
    if not sep or not prefix:
        raise InvalidLocator(f"Invalid path format, no folder specified: {text!r}")
    if not bucket:
        raise InvalidLocator(f"Invalid path format, empty bucket name: {text!r}")
    return StorageLocator(scheme=scheme, bucket=bucket, prefix=prefix)
