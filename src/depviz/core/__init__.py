"""Core library: document parsing, occurrence indexing, conflict detection, queries."""

from depviz.core.conflicts import ConflictMap, detect_conflicts
from depviz.core.errors import (
    CycleDetectedError,
    DepvizError,
    MalformedInputError,
    NoMatchError,
)
from depviz.core.index import Occurrence, PackageIndex, build_index
from depviz.core.query import (
    ConflictDetail,
    ConflictEntry,
    VersionFilter,
    filter_by_version,
    list_conflicts,
    search,
    sort_conflicted_packages,
)
from depviz.core.session import DependencySession, PackageDetails, SessionStats
from depviz.core.tree import DependencyNode, load_document, parse_document
from depviz.core.versions import compare_versions, sort_versions_desc

__all__ = [
    "ConflictMap",
    "detect_conflicts",
    "CycleDetectedError",
    "DepvizError",
    "MalformedInputError",
    "NoMatchError",
    "Occurrence",
    "PackageIndex",
    "build_index",
    "ConflictDetail",
    "ConflictEntry",
    "VersionFilter",
    "filter_by_version",
    "list_conflicts",
    "search",
    "sort_conflicted_packages",
    "DependencySession",
    "PackageDetails",
    "SessionStats",
    "DependencyNode",
    "load_document",
    "parse_document",
    "compare_versions",
    "sort_versions_desc",
]
