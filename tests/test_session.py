"""Tests for depviz.core.session module."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from depviz.core.errors import CycleDetectedError, MalformedInputError, NoMatchError
from depviz.core.index import Occurrence
from depviz.core.session import DependencySession, SessionStats
from depviz.core.tree import DependencyNode

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

OTHER = {
    "name": "tool",
    "version": "0.2.0",
    "dependencies": {"chalk": {"version": "5.3.0"}},
}


class TestDependencySession:
    """Tests for DependencySession."""

    def test_empty_session(self) -> None:
        session = DependencySession()
        assert not session.is_loaded
        assert session.root is None
        assert session.index == {}
        assert session.conflicts == {}
        assert session.stats() == SessionStats(0, 0, 0)
        assert session.search("") == []
        with pytest.raises(NoMatchError):
            session.search("pad")

    def test_from_document(self) -> None:
        session = DependencySession.from_document(EXAMPLE)
        assert session.is_loaded
        assert session.root.name == "app"
        assert session.index["left-pad"][1] == Occurrence("1.0.1", ("lodash", "left-pad"))
        assert session.conflicts == {"left-pad": ["1.0.0", "1.0.1"]}

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "deps.json"
        path.write_text(json.dumps(EXAMPLE))
        session = DependencySession.from_file(path)
        assert session.index == DependencySession.from_document(EXAMPLE).index

    def test_load_node(self) -> None:
        root = DependencyNode(
            name="app",
            version="1",
            dependencies={"a": DependencyNode(name="a", version="2")},
        )
        session = DependencySession()
        session.load(root)
        assert session.root is root
        assert list(session.index) == ["a"]

    def test_reload_replaces_everything(self) -> None:
        session = DependencySession.from_document(EXAMPLE)
        session.load(OTHER)
        assert session.root.name == "tool"
        assert list(session.index) == ["chalk"]
        assert session.conflicts == {}

    def test_reload_idempotent(self) -> None:
        session = DependencySession.from_document(EXAMPLE)
        index, conflicts = session.index, session.conflicts
        session.load(EXAMPLE)
        assert session.index == index
        assert session.conflicts == conflicts

    def test_failed_load_keeps_previous(self) -> None:
        session = DependencySession.from_document(EXAMPLE)
        bad = {"name": "bad", "version": "1", "dependencies": {"x": {"version": 1}}}
        with pytest.raises(MalformedInputError):
            session.load(bad)
        assert session.root.name == "app"
        assert session.conflicts == {"left-pad": ["1.0.0", "1.0.1"]}

    def test_failed_file_load_keeps_previous(self, tmp_path: Path) -> None:
        session = DependencySession.from_document(EXAMPLE)
        path = tmp_path / "bad.json"
        path.write_text("[1, 2")
        with pytest.raises(MalformedInputError):
            session.load_file(path)
        assert session.root.name == "app"

    def test_cyclic_node_keeps_previous(self) -> None:
        session = DependencySession.from_document(EXAMPLE)
        a = DependencyNode(name="a", version="1")
        a.dependencies["a"] = a
        with pytest.raises(CycleDetectedError):
            session.load(DependencyNode(name="root", version="1", dependencies={"a": a}))
        assert session.root.name == "app"

    def test_failed_load_logs_warning(self, caplog) -> None:
        session = DependencySession()
        with caplog.at_level(logging.WARNING, logger="depviz.core.session"):
            with pytest.raises(MalformedInputError):
                session.load({"name": "app"})
        assert "Rejected dependency document" in caplog.text

    def test_index_is_a_copy(self) -> None:
        session = DependencySession.from_document(EXAMPLE)
        session.index["left-pad"].clear()
        session.index.pop("lodash")
        session.conflicts["left-pad"].append("9.9.9")
        assert len(session.index["left-pad"]) == 2
        assert "lodash" in session.index
        assert session.conflicts["left-pad"] == ["1.0.0", "1.0.1"]

    def test_stats(self) -> None:
        stats = DependencySession.from_document(EXAMPLE).stats()
        assert stats == SessionStats(total_packages=2, conflicted_packages=1, total_occurrences=3)
        assert stats.has_conflicts
        assert stats.to_dict() == {
            "total_packages": 2,
            "conflicted_packages": 1,
            "total_occurrences": 3,
        }

    def test_queries(self) -> None:
        session = DependencySession.from_document(EXAMPLE)
        assert session.search("pad") == ["left-pad"]
        with pytest.raises(NoMatchError):
            session.search("xyz")
        assert list(session.list_conflicts("left-pad").groups) == ["1.0.1", "1.0.0"]
        assert [e.name for e in session.sort_conflicted_packages("count")] == ["left-pad"]
        result = session.filter_by_version("left-pad", "1.0.0")
        assert result.matching == [("left-pad",)]
        assert session.is_conflicted("left-pad")
        assert not session.is_conflicted("lodash")

    def test_package_details(self) -> None:
        session = DependencySession.from_document(EXAMPLE)
        details = session.package_details("left-pad")
        assert details.versions == ["1.0.0", "1.0.1"]
        assert details.conflict.has_conflicts
        lodash = session.package_details("lodash")
        assert lodash.versions == ["4.17.21"]
        assert not lodash.conflict.has_conflicts
        assert lodash.to_dict()["conflict"]["groups"] == []

    def test_max_depth(self) -> None:
        session = DependencySession(max_depth=1)
        with pytest.raises(MalformedInputError):
            session.load(EXAMPLE)
        assert not session.is_loaded


class TestExampleDocument:
    """The example document shipped with the project."""

    EXAMPLE_FILE = Path(__file__).resolve().parent.parent / "examples" / "example-dependency.json"

    def test_conflicts(self) -> None:
        session = DependencySession.from_file(self.EXAMPLE_FILE)
        assert session.root.name == "storefront"
        assert [e.name for e in session.sort_conflicted_packages("name")] == [
            "debug",
            "left-pad",
            "mime",
            "ms",
        ]
        assert [e.name for e in session.sort_conflicted_packages("count")] == [
            "ms",
            "debug",
            "left-pad",
            "mime",
        ]

    def test_ms_grouping(self) -> None:
        session = DependencySession.from_file(self.EXAMPLE_FILE)
        detail = session.list_conflicts("ms")
        assert list(detail.groups) == ["2.1.3", "2.1.2", "2.0.0"]
        assert detail.groups["2.0.0"] == [
            ("express", "debug", "ms"),
            ("express", "send", "debug", "ms"),
        ]
        assert detail.total_occurrences == 4

    def test_search(self) -> None:
        session = DependencySession.from_file(self.EXAMPLE_FILE)
        assert session.search("MIME") == ["mime", "mime-types", "mime-db"]
