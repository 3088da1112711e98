"""
Recognition of Cromwell intermediate artifacts by object key.

An artifact key ends with ``<uuid>/call-<name>/shard-<n>/<leaf>``, optionally
preceded by any user prefix.
"""

from __future__ import annotations

import re
from typing import Iterable

from .listing import ObjectRef

ARTIFACT_LEAVES = (
    "script",
    "rc",
    "gcs_delocalization.sh",
    "gcs_localization.sh",
    "gcs_transfer.sh",
    "stdout",
    "stderr",
)

_UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
_LEAF = "|".join(re.escape(leaf) for leaf in ARTIFACT_LEAVES)

ARTIFACT_PATTERN = re.compile(
    rf"(?:^|/){_UUID}/call-[\w\-]+/shard-\d{{1,5}}/"
    rf"(?:{_LEAF}|pipelines-logs/action/\d+/(?:stdout|stderr))\Z"
)


def is_intermediate_artifact(key: str) -> bool:
    """Return True if the object key has the Cromwell intermediate artifact shape."""
    if not isinstance(key, str):
        return False
    return ARTIFACT_PATTERN.search(key) is not None


def filter_artifacts(objects: Iterable[ObjectRef]) -> list[ObjectRef]:
    """Keep only the objects whose names match, preserving order."""
    return [obj for obj in objects if is_intermediate_artifact(obj.name)]
