"""A loaded dependency document together with its index and conflict map."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from depviz.core.conflicts import ConflictMap, detect_conflicts, distinct_versions
from depviz.core.errors import DepvizError
from depviz.core.index import PackageIndex, build_index
from depviz.core.query import (
    ConflictDetail,
    ConflictEntry,
    VersionFilter,
    filter_by_version,
    list_conflicts,
    search,
    sort_conflicted_packages,
)
from depviz.core.tree import DependencyNode, load_document, parse_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionStats:
    """Counters shown next to the tree."""

    total_packages: int
    conflicted_packages: int
    total_occurrences: int

    @property
    def has_conflicts(self) -> bool:
        return self.conflicted_packages > 0

    def to_dict(self) -> dict:
        return {
            "total_packages": self.total_packages,
            "conflicted_packages": self.conflicted_packages,
            "total_occurrences": self.total_occurrences,
        }


@dataclass(frozen=True)
class PackageDetails:
    """Everything known about one package name."""

    name: str
    versions: list[str]
    conflict: ConflictDetail

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "versions": list(self.versions),
            "conflict": self.conflict.to_dict(),
        }


@dataclass(frozen=True)
class _Snapshot:
    root: DependencyNode | None = None
    index: PackageIndex = field(default_factory=dict)
    conflicts: ConflictMap = field(default_factory=dict)


class DependencySession:
    """
    Owns the currently loaded document and answers queries about it.

    Loading replaces the whole snapshot at once: the new index and conflict map
    are built completely before they become visible, and a document that fails
    validation leaves the previous one in place.
    """

    def __init__(self, *, max_depth: int | None = None) -> None:
        self._max_depth = max_depth
        self._snapshot = _Snapshot()

    @classmethod
    def from_document(cls, data: Any, *, max_depth: int | None = None) -> DependencySession:
        session = cls(max_depth=max_depth)
        session.load(data)
        return session

    @classmethod
    def from_file(cls, path: Path | str, *, max_depth: int | None = None) -> DependencySession:
        session = cls(max_depth=max_depth)
        session.load_file(path)
        return session

    def load(self, data: Any) -> None:
        """Replace the session contents with a decoded document (or DependencyNode)."""
        try:
            if isinstance(data, DependencyNode):
                root = data
            else:
                root = parse_document(data, max_depth=self._max_depth)
            self._install(root)
        except DepvizError as e:
            logger.warning("Rejected dependency document: %s", e)
            raise

    def load_file(self, path: Path | str) -> None:
        """Replace the session contents with the JSON document at ``path``."""
        try:
            root = load_document(path, max_depth=self._max_depth)
            self._install(root)
        except DepvizError as e:
            logger.warning("Rejected dependency document %s: %s", path, e)
            raise

    def _install(self, root: DependencyNode) -> None:
        index = build_index(root, max_depth=self._max_depth)
        conflicts = detect_conflicts(index)
        self._snapshot = _Snapshot(root=root, index=index, conflicts=conflicts)
        logger.debug(
            "Loaded %s %s: %d packages, %d conflicted",
            root.name,
            root.version,
            len(index),
            len(conflicts),
        )

    @property
    def is_loaded(self) -> bool:
        return self._snapshot.root is not None

    @property
    def root(self) -> DependencyNode | None:
        return self._snapshot.root

    @property
    def index(self) -> PackageIndex:
        """Copy of the package index (occurrences themselves are immutable)."""
        return {name: list(occ) for name, occ in self._snapshot.index.items()}

    @property
    def conflicts(self) -> ConflictMap:
        """Copy of the conflict map."""
        return {name: list(versions) for name, versions in self._snapshot.conflicts.items()}

    def is_conflicted(self, name: str) -> bool:
        return name in self._snapshot.conflicts

    def stats(self) -> SessionStats:
        snap = self._snapshot
        return SessionStats(
            total_packages=len(snap.index),
            conflicted_packages=len(snap.conflicts),
            total_occurrences=sum(len(occ) for occ in snap.index.values()),
        )

    def search(self, term: str) -> list[str]:
        return search(self._snapshot.index, term)

    def list_conflicts(self, name: str) -> ConflictDetail:
        snap = self._snapshot
        return list_conflicts(snap.index, snap.conflicts, name)

    def sort_conflicted_packages(self, order: str = "name") -> list[ConflictEntry]:
        return sort_conflicted_packages(self._snapshot.conflicts, order)

    def filter_by_version(self, name: str, version: str) -> VersionFilter:
        return filter_by_version(self._snapshot.index, name, version)

    def package_details(self, name: str) -> PackageDetails:
        """Versions seen for ``name`` plus its conflict detail."""
        snap = self._snapshot
        return PackageDetails(
            name=name,
            versions=distinct_versions(snap.index.get(name, [])),
            conflict=list_conflicts(snap.index, snap.conflicts, name),
        )
