"""Parse and represent dependency trees loaded from JSON documents."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from depviz.core.errors import CycleDetectedError, MalformedInputError
from depviz.core.settings import get_max_depth

logger = logging.getLogger(__name__)


@dataclass
class DependencyNode:
    """A node in the dependency tree: one package and its direct dependencies."""

    name: str
    version: str
    dependencies: dict[str, DependencyNode] = field(default_factory=dict)

    @property
    def children(self) -> list[DependencyNode]:
        """Direct dependencies in document order."""
        return list(self.dependencies.values())

    def to_dict(self) -> dict:
        """Serialize node to a JSON-friendly dict in the input document shape."""
        result = {"name": self.name, "version": self.version, "dependencies": {}}
        stack: list[tuple[DependencyNode, dict]] = [(self, result)]
        while stack:
            node, out = stack.pop()
            for key, child in node.dependencies.items():
                child_out = {"name": child.name, "version": child.version, "dependencies": {}}
                out["dependencies"][key] = child_out
                stack.append((child, child_out))
        return result


def _join(location: str, part: str) -> str:
    return f"{location}.{part}" if location else part


def _require_version(raw: Mapping, location: str) -> str:
    version = raw.get("version")
    if not isinstance(version, str):
        raise MalformedInputError("missing or non-string 'version'", _join(location, "version"))
    return version


def _dependency_mapping(raw: Mapping, location: str) -> Mapping:
    deps = raw.get("dependencies")
    # null is treated like an absent field
    if deps is None:
        return {}
    if not isinstance(deps, Mapping):
        raise MalformedInputError(
            "'dependencies' must be a mapping of name to package",
            _join(location, "dependencies"),
        )
    return deps


def parse_document(data: Any, *, max_depth: int | None = None) -> DependencyNode:
    """
    Validate a decoded dependency document and build its DependencyNode tree.

    The root needs string ``name`` and ``version`` fields. Each entry of a
    ``dependencies`` mapping is keyed by the child's name and needs a string
    ``version``; any other fields (``resolved``, ``integrity``, ...) are ignored,
    so ``npm ls --all --json`` output can be loaded as-is.

    The walk uses an explicit stack. Nesting deeper than ``max_depth`` (default
    from DEPVIZ_MAX_DEPTH) raises MalformedInputError and a mapping that contains
    itself raises CycleDetectedError.
    """
    if max_depth is None:
        max_depth = get_max_depth()
    if not isinstance(data, Mapping):
        raise MalformedInputError("document root must be a JSON object")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedInputError("missing or non-string 'name'", "name")
    root = DependencyNode(name=name, version=_require_version(data, ""))

    # (raw children, parent node, location, ancestor ids, ancestor names, depth of children)
    stack: list[tuple[Mapping, DependencyNode, str, tuple[int, ...], tuple[str, ...], int]] = [
        (_dependency_mapping(data, ""), root, "", (id(data),), (name,), 1)
    ]
    while stack:
        raw_deps, parent, location, ancestors, names, depth = stack.pop()
        if raw_deps and depth > max_depth:
            raise MalformedInputError(
                f"dependency tree is nested deeper than {max_depth} levels", location
            )
        deps_location = _join(location, "dependencies")
        for key, raw_child in raw_deps.items():
            child_location = _join(deps_location, str(key))
            if not isinstance(key, str) or not key:
                raise MalformedInputError("dependency names must be non-empty strings", child_location)
            if not isinstance(raw_child, Mapping):
                raise MalformedInputError("dependency entry must be a JSON object", child_location)
            if id(raw_child) in ancestors:
                raise CycleDetectedError([*names, key])
            child = DependencyNode(name=key, version=_require_version(raw_child, child_location))
            parent.dependencies[key] = child
            stack.append(
                (
                    _dependency_mapping(raw_child, child_location),
                    child,
                    child_location,
                    (*ancestors, id(raw_child)),
                    (*names, key),
                    depth + 1,
                )
            )
    return root


def load_document(path: Path | str, *, max_depth: int | None = None) -> DependencyNode:
    """
    Read a JSON dependency document from a file ("-" reads stdin) and parse it.

    Raises MalformedInputError when the file cannot be read or decoded.
    """
    try:
        if str(path) == "-":
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"cannot read document: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"invalid JSON: {e}") from e
    logger.debug("Read %d bytes of JSON from %s", len(text), path)
    return parse_document(data, max_depth=max_depth)
