"""Read-only queries over a package index and its conflict map."""

from __future__ import annotations

from dataclasses import dataclass, field

from depviz.core.conflicts import ConflictMap
from depviz.core.errors import NoMatchError
from depviz.core.index import PackageIndex
from depviz.core.versions import sort_versions_desc

SORT_ORDERS = ("name", "count")
# Label used by the original browser UI's "Sort by Duplicates" button.
_SORT_ALIASES = {"duplicates": "count"}


@dataclass(frozen=True)
class ConflictEntry:
    """A conflicted package and its distinct versions."""

    name: str
    versions: tuple[str, ...]

    @property
    def version_count(self) -> int:
        return len(self.versions)

    def to_dict(self) -> dict:
        return {"name": self.name, "versions": list(self.versions)}


@dataclass(frozen=True)
class ConflictDetail:
    """Occurrence paths of one package grouped by version, highest version first."""

    name: str
    groups: dict[str, list[tuple[str, ...]]] = field(default_factory=dict)
    total_occurrences: int = 0
    distinct_versions: int = 0

    @property
    def has_conflicts(self) -> bool:
        return bool(self.groups)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "has_conflicts": self.has_conflicts,
            "total_occurrences": self.total_occurrences,
            "distinct_versions": self.distinct_versions,
            "groups": [
                {"version": version, "paths": [list(p) for p in paths]}
                for version, paths in self.groups.items()
            ],
        }


@dataclass(frozen=True)
class VersionFilter:
    """Occurrence paths of one package split by whether they carry a target version."""

    name: str
    version: str
    matching: list[tuple[str, ...]] = field(default_factory=list)
    non_matching: list[tuple[str, ...]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "version": self.version,
            "matching": [list(p) for p in self.matching],
            "non_matching": [list(p) for p in self.non_matching],
        }


def search(index: PackageIndex, term: str) -> list[str]:
    """
    Case-insensitive substring search over package names, in index order.

    A blank term returns an empty list. A term that matches nothing raises
    NoMatchError.
    """
    needle = term.strip().lower()
    if not needle:
        return []
    matches = [name for name in index if needle in name.lower()]
    if not matches:
        raise NoMatchError(term)
    return matches


def list_conflicts(index: PackageIndex, conflicts: ConflictMap, name: str) -> ConflictDetail:
    """
    Group the occurrence paths of a conflicted package by version.

    Versions are ordered highest first (see depviz.core.versions). A name that
    is unknown or has a single version yields a detail with no groups.
    """
    occurrences = index.get(name, [])
    if name not in conflicts:
        return ConflictDetail(
            name=name,
            total_occurrences=len(occurrences),
            distinct_versions=len({occ.version for occ in occurrences}),
        )
    by_version: dict[str, list[tuple[str, ...]]] = {}
    for occ in occurrences:
        by_version.setdefault(occ.version, []).append(occ.path)
    groups = {version: by_version[version] for version in sort_versions_desc(by_version)}
    return ConflictDetail(
        name=name,
        groups=groups,
        total_occurrences=len(occurrences),
        distinct_versions=len(groups),
    )


def _name_key(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


def sort_conflicted_packages(conflicts: ConflictMap, order: str = "name") -> list[ConflictEntry]:
    """
    List conflicted packages sorted by name, or by version count (most first).

    Packages with the same version count are ordered by name. Names compare
    case-insensitively via ``str.casefold`` (then by exact name), which does not
    depend on the process locale.
    """
    order = _SORT_ALIASES.get(order, order)
    if order == "name":
        names = sorted(conflicts, key=_name_key)
    elif order == "count":
        names = sorted(conflicts, key=lambda n: (-len(conflicts[n]), *_name_key(n)))
    else:
        raise ValueError(f"Unknown sort order {order!r}; expected one of {SORT_ORDERS}")
    return [ConflictEntry(name=n, versions=tuple(conflicts[n])) for n in names]


def filter_by_version(index: PackageIndex, name: str, version: str) -> VersionFilter:
    """Split the occurrence paths of ``name`` into those at ``version`` and the rest."""
    matching: list[tuple[str, ...]] = []
    non_matching: list[tuple[str, ...]] = []
    for occ in index.get(name, []):
        (matching if occ.version == version else non_matching).append(occ.path)
    return VersionFilter(name=name, version=version, matching=matching, non_matching=non_matching)
