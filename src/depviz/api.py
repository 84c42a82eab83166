"""Public API: use depviz from Python or from other tools."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from depviz.core.conflicts import ConflictMap, detect_conflicts
from depviz.core.errors import (
    CycleDetectedError,
    DepvizError,
    MalformedInputError,
    NoMatchError,
)
from depviz.core.index import Occurrence, PackageIndex, build_index
from depviz.core.query import ConflictDetail, ConflictEntry, VersionFilter
from depviz.core.session import DependencySession, PackageDetails, SessionStats
from depviz.core.tree import DependencyNode, load_document, parse_document


def open_session(
    source: Path | str | Any,
    *,
    max_depth: int | None = None,
) -> DependencySession:
    """
    Create a session for one dependency document.

    Args:
        source: Path to a JSON file ("-" for stdin), a decoded document
            (dict), or an already built DependencyNode.
        max_depth: Optional nesting limit; None uses DEPVIZ_MAX_DEPTH or the default.

    Returns:
        A loaded DependencySession.

    Raises:
        MalformedInputError: the document is unreadable or structurally invalid.
        CycleDetectedError: a DependencyNode tree refers back to one of its ancestors.
    """
    if isinstance(source, (str, Path)):
        return DependencySession.from_file(source, max_depth=max_depth)
    return DependencySession.from_document(source, max_depth=max_depth)


def analyze(
    data: Any,
    *,
    max_depth: int | None = None,
) -> tuple[PackageIndex, ConflictMap]:
    """
    Index a decoded document and detect its conflicts in one call.

    Returns:
        (package index, conflict map). Neither is attached to a session.
    """
    index = build_index(data, max_depth=max_depth)
    return index, detect_conflicts(index)


__all__ = [
    "open_session",
    "analyze",
    "load_document",
    "parse_document",
    "build_index",
    "detect_conflicts",
    "DependencyNode",
    "DependencySession",
    "Occurrence",
    "PackageIndex",
    "ConflictMap",
    "ConflictDetail",
    "ConflictEntry",
    "VersionFilter",
    "PackageDetails",
    "SessionStats",
    "DepvizError",
    "MalformedInputError",
    "CycleDetectedError",
    "NoMatchError",
]
