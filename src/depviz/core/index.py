"""Flatten a dependency tree into a per-package index of occurrences."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from depviz.core.errors import CycleDetectedError, MalformedInputError
from depviz.core.settings import get_max_depth
from depviz.core.tree import DependencyNode, parse_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Occurrence:
    """One appearance of a package in the tree, with its path from the root."""

    version: str
    path: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.path[-1]

    @property
    def depth(self) -> int:
        """Depth below the root project (direct dependencies are at depth 1)."""
        return len(self.path)

    def to_dict(self) -> dict:
        return {"version": self.version, "path": list(self.path)}


PackageIndex = dict[str, list[Occurrence]]


def _check_node(node: Any, path: tuple[str, ...], max_depth: int) -> None:
    location = ".".join(path)
    if not isinstance(node, DependencyNode):
        raise MalformedInputError("dependency entry is not a DependencyNode", location)
    if not isinstance(node.name, str) or not node.name:
        raise MalformedInputError("missing or non-string 'name'", location)
    if not isinstance(node.version, str):
        raise MalformedInputError("missing or non-string 'version'", location)
    if not isinstance(node.dependencies, Mapping):
        raise MalformedInputError("'dependencies' must be a mapping of name to package", location)
    if len(path) > max_depth:
        raise MalformedInputError(f"dependency tree is nested deeper than {max_depth} levels", location)


def build_index(
    root: DependencyNode | Mapping,
    *,
    max_depth: int | None = None,
) -> PackageIndex:
    """
    Build the package index for a dependency tree.

    Walks ``root.dependencies`` in preorder, following document order at every
    level; the root project itself is not indexed. Each visited node adds one
    Occurrence under its name, so a package shared by several parents gets one
    Occurrence per position.

    A raw decoded document may be passed instead of a DependencyNode; it is
    validated with parse_document first.

    Raises:
        MalformedInputError: a node has a bad name/version/dependencies field or
            the tree is nested deeper than ``max_depth``.
        CycleDetectedError: a node is reached again below itself.
    """
    if max_depth is None:
        max_depth = get_max_depth()
    if isinstance(root, Mapping):
        root = parse_document(root, max_depth=max_depth)
    _check_node(root, (), max_depth)

    index: PackageIndex = {}
    # Children are pushed in reverse so pops come out in document order.
    stack: list[tuple[DependencyNode, tuple[str, ...], tuple[int, ...]]] = [
        (child, (), (id(root),)) for child in reversed(list(root.dependencies.values()))
    ]
    while stack:
        node, parent_path, ancestors = stack.pop()
        path = (*parent_path, getattr(node, "name", "?"))
        _check_node(node, path, max_depth)
        if id(node) in ancestors:
            raise CycleDetectedError([root.name, *path])
        index.setdefault(node.name, []).append(Occurrence(version=node.version, path=path))
        for child in reversed(list(node.dependencies.values())):
            stack.append((child, path, (*ancestors, id(node))))

    logger.debug(
        "Indexed %d packages (%d occurrences) under %s",
        len(index),
        sum(len(occ) for occ in index.values()),
        root.name,
    )
    return index
