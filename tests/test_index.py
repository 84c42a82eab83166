"""Tests for depviz.core.index module."""

from __future__ import annotations

import pytest

from depviz.core.errors import CycleDetectedError, MalformedInputError
from depviz.core.index import Occurrence, build_index
from depviz.core.tree import DependencyNode, parse_document

EXAMPLE = {
    "name": "app",
    "version": "1.0.0",
    "dependencies": {
        "left-pad": {"version": "1.0.0"},
        "lodash": {
            "version": "4.17.21",
            "dependencies": {"left-pad": {"version": "1.0.1"}},
        },
    },
}

NESTED = {
    "name": "web",
    "version": "0.1.0",
    "dependencies": {
        "express": {
            "version": "4.18.2",
            "dependencies": {
                "debug": {"version": "2.6.9", "dependencies": {"ms": {"version": "2.0.0"}}},
                "send": {
                    "version": "0.18.0",
                    "dependencies": {
                        "debug": {"version": "2.6.9", "dependencies": {"ms": {"version": "2.0.0"}}},
                        "ms": {"version": "2.1.3"},
                    },
                },
            },
        },
        "ms": {"version": "2.1.3"},
    },
}


def _count_entries(doc: dict) -> int:
    total = 0
    stack = [doc.get("dependencies") or {}]
    while stack:
        deps = stack.pop()
        for child in deps.values():
            total += 1
            stack.append(child.get("dependencies") or {})
    return total


class TestOccurrence:
    """Tests for Occurrence dataclass."""

    def test_name_and_depth(self) -> None:
        occ = Occurrence(version="1.0.1", path=("lodash", "left-pad"))
        assert occ.name == "left-pad"
        assert occ.depth == 2

    def test_immutable(self) -> None:
        occ = Occurrence(version="1.0.0", path=("a",))
        with pytest.raises(AttributeError):
            occ.version = "2.0.0"  # type: ignore[misc]

    def test_to_dict(self) -> None:
        occ = Occurrence(version="1.0.0", path=("a", "b"))
        assert occ.to_dict() == {"version": "1.0.0", "path": ["a", "b"]}


class TestBuildIndex:
    """Tests for build_index."""

    def test_example(self) -> None:
        index = build_index(parse_document(EXAMPLE))
        assert list(index) == ["left-pad", "lodash"]
        assert index["left-pad"] == [
            Occurrence(version="1.0.0", path=("left-pad",)),
            Occurrence(version="1.0.1", path=("lodash", "left-pad")),
        ]
        assert index["lodash"] == [Occurrence(version="4.17.21", path=("lodash",))]

    def test_root_not_indexed(self) -> None:
        index = build_index(parse_document(EXAMPLE))
        assert "app" not in index

    def test_accepts_raw_document(self) -> None:
        assert build_index(EXAMPLE) == build_index(parse_document(EXAMPLE))

    def test_raw_document_is_validated(self) -> None:
        with pytest.raises(MalformedInputError):
            build_index({"name": "app", "version": "1", "dependencies": {"a": {}}})

    def test_preorder_document_order(self) -> None:
        index = build_index(NESTED)
        assert list(index) == ["express", "debug", "ms", "send"]
        assert [o.path for o in index["ms"]] == [
            ("express", "debug", "ms"),
            ("express", "send", "debug", "ms"),
            ("express", "send", "ms"),
            ("ms",),
        ]

    def test_repeated_positions_each_recorded(self) -> None:
        index = build_index(NESTED)
        assert [o.version for o in index["debug"]] == ["2.6.9", "2.6.9"]

    def test_completeness(self) -> None:
        for doc in (EXAMPLE, NESTED):
            index = build_index(doc)
            assert sum(len(occ) for occ in index.values()) == _count_entries(doc)

    def test_paths_end_with_name(self) -> None:
        for name, occurrences in build_index(NESTED).items():
            for occ in occurrences:
                assert occ.path[-1] == name
                assert occ.name == name

    def test_idempotent(self) -> None:
        assert build_index(NESTED) == build_index(NESTED)

    def test_empty_dependencies(self) -> None:
        assert build_index({"name": "app", "version": "1"}) == {}

    def test_cycle_detected(self) -> None:
        a = DependencyNode(name="a", version="1")
        b = DependencyNode(name="b", version="1", dependencies={"a": a})
        a.dependencies["b"] = b
        root = DependencyNode(name="app", version="1", dependencies={"a": a})
        with pytest.raises(CycleDetectedError) as exc:
            build_index(root)
        assert exc.value.path == ["app", "a", "b", "a"]

    def test_shared_node_is_not_a_cycle(self) -> None:
        shared = DependencyNode(name="s", version="1")
        a = DependencyNode(name="a", version="1", dependencies={"s": shared})
        root = DependencyNode(name="app", version="1", dependencies={"a": a, "s": shared})
        index = build_index(root)
        assert [o.path for o in index["s"]] == [("a", "s"), ("s",)]

    def test_bad_version_type(self) -> None:
        root = DependencyNode(
            name="app",
            version="1",
            dependencies={"a": DependencyNode(name="a", version=None)},  # type: ignore[arg-type]
        )
        with pytest.raises(MalformedInputError):
            build_index(root)

    def test_bad_dependencies_type(self) -> None:
        root = DependencyNode(name="app", version="1", dependencies=["a"])  # type: ignore[arg-type]
        with pytest.raises(MalformedInputError):
            build_index(root)

    def test_max_depth(self) -> None:
        doc = {
            "name": "app",
            "version": "1",
            "dependencies": {"a": {"version": "1", "dependencies": {"b": {"version": "1"}}}},
        }
        root = parse_document(doc)
        assert len(build_index(root, max_depth=2)) == 2
        with pytest.raises(MalformedInputError):
            build_index(root, max_depth=1)
