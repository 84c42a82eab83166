"""Detect packages that appear with more than one version."""

from __future__ import annotations

import logging

from depviz.core.index import PackageIndex

logger = logging.getLogger(__name__)

ConflictMap = dict[str, list[str]]


def distinct_versions(occurrences) -> list[str]:
    """Distinct version labels in first-seen order."""
    return list(dict.fromkeys(occ.version for occ in occurrences))


def detect_conflicts(index: PackageIndex) -> ConflictMap:
    """
    Map each package name seen with more than one version to those versions.

    Versions are listed in the order they were first seen in the index.
    Names with a single version (however often they occur) are left out.
    """
    conflicts: ConflictMap = {}
    for name, occurrences in index.items():
        versions = distinct_versions(occurrences)
        if len(versions) > 1:
            conflicts[name] = versions
    logger.debug("Found %d conflicted packages out of %d", len(conflicts), len(index))
    return conflicts
