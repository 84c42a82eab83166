"""Textual TUI for browsing a dependency document and its version conflicts."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, Input, LoadingIndicator, Static, Tree
from textual.widgets.tree import TreeNode
from textual.worker import Worker, WorkerState

from depviz.core.errors import NoMatchError
from depviz.core.query import ConflictDetail
from depviz.core.session import DependencySession
from depviz.core.tree import DependencyNode

# Welcome banner: DEPVIZ (all lines must be same length for proper centering)
WELCOME_BANNER = """\
[bold cyan]
██████╗ ███████╗██████╗ ██╗   ██╗██╗███████╗
██╔══██╗██╔════╝██╔══██╗██║   ██║██║╚══███╔╝
██║  ██║█████╗  ██████╔╝██║   ██║██║  ███╔╝ 
██║  ██║██╔══╝  ██╔═══╝ ╚██╗ ██╔╝██║ ███╔╝  
██████╔╝███████╗██║      ╚████╔╝ ██║███████╗
╚═════╝ ╚══════╝╚═╝       ╚═══╝  ╚═╝╚══════╝
[/bold cyan]"""

WELCOME_DESC = """[dim]Browse a package dependency tree loaded from JSON.
Packages installed at more than one version are flagged in red.
Search, sort the conflicts, and filter occurrences by version.[/]"""

# Limits to avoid huge trees and crashes
MAX_TREE_DEPTH = 12
MAX_TREE_NODES = 5000
EXPAND_DEPTH_DEFAULT = 2
MAX_PATHS_PER_VERSION = 10  # occurrence paths listed per version in the details panel

# Colors
COLOR_HEADER = "bold magenta"
COLOR_PKG = "white"
COLOR_CONFLICT = "bold red"
COLOR_STATS = "cyan"
COLOR_MATCH = "bold black on green"
COLOR_DIM = "dim"


@dataclass(frozen=True)
class NodeRef:
    """Data attached to a tree widget node: the package and its path from the root."""

    node: DependencyNode
    path: tuple[str, ...]


def _count_nodes(node: Any) -> int:
    """Count nodes in tree (for cap)."""
    n = 1
    for c in getattr(node, "children", []):
        n += _count_nodes(c)
    return n


def _node_stats(node: Any) -> tuple[int, int, int]:
    """Return (direct_children, total_descendants, max_depth) for a node."""
    children = getattr(node, "children", []) or []
    direct = len(children)
    total = 0
    max_d = 0
    for c in children:
        sub_direct, sub_total, sub_depth = _node_stats(c)
        total += 1 + sub_total
        max_d = max(max_d, 1 + sub_depth)
    return direct, total, max_d


def _node_label(node: DependencyNode, conflicted: bool, style: str | None = None) -> str:
    """Label for a package in the tree; ``style`` overrides the name color."""
    color = style or (COLOR_CONFLICT if conflicted else COLOR_PKG)
    marker = " [bold red]![/]" if conflicted and style is None else ""
    return f"[{color}]{node.name}[/] [dim]v{node.version or '?'}[/]{marker}"


def _format_conflict_detail(detail: ConflictDetail, max_paths: int = MAX_PATHS_PER_VERSION) -> str:
    """Render grouped conflict detail as markup for the details panel."""
    if not detail.has_conflicts:
        return "[dim]No version conflicts for this package.[/]"
    lines = [
        f"Found [{COLOR_STATS}]{detail.total_occurrences}[/] instances with "
        f"[{COLOR_STATS}]{detail.distinct_versions}[/] different versions:",
    ]
    for version, paths in detail.groups.items():
        lines.append(f"  [bold]Version {version}[/] ({len(paths)} instances)")
        for path in paths[:max_paths]:
            lines.append(f"    [dim]{' → '.join(path)}[/]")
        if len(paths) > max_paths:
            lines.append(f"    [dim]… and {len(paths) - max_paths} more[/]")
    return "\n".join(lines)


def _populate_textual_tree(
    tn: TreeNode,
    node: DependencyNode,
    conflicted: set[str],
    *,
    path: tuple[str, ...] = (),
    depth: int = 0,
    max_depth: int = MAX_TREE_DEPTH,
    max_nodes: int = MAX_TREE_NODES,
    node_count: list[int] | None = None,
) -> None:
    """Recursively add DependencyNode children; cap depth and total nodes."""
    if node_count is None:
        node_count = [0]
    for child in node.children:
        if node_count[0] >= max_nodes:
            tn.add_leaf(f"[dim]… truncated ({max_nodes} nodes max)[/]")
            return
        if depth >= max_depth:
            tn.add_leaf(f"[dim]{child.name} …[/]")
            continue
        node_count[0] += 1
        child_path = (*path, child.name)
        label = _node_label(child, child.name in conflicted)
        ref = NodeRef(node=child, path=child_path)
        if child.dependencies:
            child_tn = tn.add(label, data=ref, expand=False)
            _populate_textual_tree(
                child_tn,
                child,
                conflicted,
                path=child_path,
                depth=depth + 1,
                max_depth=max_depth,
                max_nodes=max_nodes,
                node_count=node_count,
            )
        else:
            tn.add_leaf(label, data=ref)


def _expand_to_depth(tn: TreeNode, depth: int, current: int = 0) -> None:
    """Expand tree nodes up to given depth (0 = root only)."""
    if current >= depth:
        return
    tn.expand()
    for child in tn.children:
        _expand_to_depth(child, depth, current + 1)


def _iter_tree_nodes(tn: TreeNode):
    """Yield a widget tree node and all its descendants in display order."""
    stack = [tn]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


class SearchScreen(ModalScreen[str | None]):
    """Modal to search for packages in the tree. Keyboard-only."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    DEFAULT_CSS = """
    SearchScreen {
        align: center middle;
        padding: 2 4;
    }
    SearchScreen #search_title {
        text-align: center;
        padding-bottom: 1;
    }
    SearchScreen #search_input {
        width: 60;
        margin: 1 0;
    }
    SearchScreen #search_hint {
        text-align: center;
        padding-top: 1;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._input: Input | None = None

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(
                "[bold cyan]Search[/]\n\nType a package name or part of one.",
                id="search_title",
                markup=True,
            )
            yield Input(
                placeholder="package name...",
                id="search_input",
            )
            yield Static(
                "[dim]Enter[/] = Search  ·  [dim]Escape[/] = Cancel\n"
                "[dim]After search: [bold]n[/bold] = next match, [bold]N[/bold] = previous[/]",
                id="search_hint",
                markup=True,
            )

    def on_mount(self) -> None:
        self._input = self.query_one("#search_input", Input)
        self._input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "search_input":
            return
        value = self._input.value.strip() if self._input else ""
        self.dismiss(value if value else None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class OpenFileScreen(ModalScreen[Path | None]):
    """Modal to enter the path of a JSON document. Enter to open, Escape to cancel."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    DEFAULT_CSS = """
    OpenFileScreen {
        align: center middle;
        padding: 2 4;
    }
    OpenFileScreen #open_file_title {
        text-align: center;
        padding-bottom: 1;
    }
    OpenFileScreen #open_file_input {
        width: 60;
        margin: 1 0;
    }
    OpenFileScreen #open_file_hint {
        text-align: center;
        padding-top: 1;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._input: Input | None = None

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(
                "[bold cyan]Open document[/]\n\n"
                "Path to a dependency JSON file (e.g. saved output of npm ls --all --json).",
                id="open_file_title",
                markup=True,
            )
            yield Input(
                placeholder="/path/to/dependencies.json",
                id="open_file_input",
            )
            yield Static(
                "[dim]Enter[/] = Open  ·  [dim]Escape[/] = Cancel",
                id="open_file_hint",
                markup=True,
            )

    def on_mount(self) -> None:
        self._input = self.query_one("#open_file_input", Input)
        self._input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Submit on Enter so no mouse/click needed."""
        if event.input.id != "open_file_input":
            return
        self._do_submit()

    def _do_submit(self) -> None:
        value = self._input.value.strip() if self._input else ""
        if not value:
            self.dismiss(None)
            return
        p = Path(value).expanduser().resolve()
        if not p.exists():
            self.notify(f"File does not exist: {p}", severity="warning", timeout=3)
            return
        if not p.is_file():
            self.notify(f"Not a file: {p}", severity="warning", timeout=3)
            return
        self.dismiss(p)

    def action_cancel(self) -> None:
        self.dismiss(None)


class DepVizApp(App[None]):
    """Terminal UI to explore a dependency tree and its version conflicts."""

    TITLE = "depviz"
    BINDINGS = [
        Binding("enter", "start_main", "Start", show=False),
        Binding("o", "open_file", "Open"),
        Binding("/", "search", "Search"),
        Binding("f", "search", "Search", show=False),
        Binding("n", "next_match", "Next match", show=False),
        Binding("N", "prev_match", "Prev match", show=False),
        Binding("s", "toggle_sort", "Sort conflicts"),
        Binding("v", "filter_version", "Filter version"),
        Binding("x", "clear_filter", "Clear filter"),
        Binding("d", "toggle_details", "Details"),
        Binding("r", "refresh", "Reload"),
        Binding("e", "expand_all", "Expand all"),
        Binding("c", "collapse_all", "Collapse"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, document_path: str | Path | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._document_path = Path(document_path) if document_path else None
        self._session = DependencySession()
        self._main_started = False
        self._loading = False
        self._pending_path: Path | None = None
        self._search_matches: list[TreeNode] = []
        self._search_index: int = 0
        self._details_visible: bool = True
        self._sort_order = "name"
        # name, index into its versions, and the labels replaced by the active filter
        self._filter_name: str | None = None
        self._filter_index: int = -1
        self._filtered_labels: list[tuple[TreeNode, str]] = []

    DEFAULT_CSS = """
    /* Welcome screen styles */
    #welcome_container {
        align: center middle;
        width: 100%;
        height: 100%;
    }
    #welcome_banner {
        text-align: center;
        content-align: center middle;
        width: 100%;
    }
    #welcome_desc {
        text-align: center;
        padding: 2 4;
    }
    #welcome_hint {
        text-align: center;
        padding-top: 1;
    }
    #welcome_loading {
        text-align: center;
        padding-top: 1;
        display: none;
    }
    #welcome_loading.loading {
        display: block;
    }
    #welcome_loading LoadingIndicator {
        background: transparent;
    }
    /* Main view styles */
    #main_container {
        display: none;
    }
    #dep_tree {
        width: 2fr;
    }
    #side_panel {
        width: 1fr;
    }
    #details {
        padding: 1 2;
        border: solid $primary;
        height: auto;
        min-height: 8;
    }
    #conflict_list {
        border: solid $warning;
        height: 1fr;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        # Welcome view (initial)
        with Container(id="welcome_container"):
            yield Static(WELCOME_BANNER, id="welcome_banner", markup=True)
            yield Static(WELCOME_DESC, id="welcome_desc", markup=True)
            yield Static(
                "[cyan]Enter[/] to explore  ·  [cyan]o[/] to open a file  ·  [dim]q[/] to quit",
                id="welcome_hint",
                markup=True,
            )
            with Container(id="welcome_loading"):
                yield LoadingIndicator()
                yield Static("[dim]Loading document...[/]", id="loading_text", markup=True)
        # Main view (hidden initially)
        with Container(id="main_container"):
            with Horizontal():
                yield Tree("Dependencies", id="dep_tree")
                with Vertical(id="side_panel"):
                    yield Static(
                        "[dim]No document loaded. Press [bold]o[/bold] to open one.[/]",
                        id="details",
                    )
                    yield Tree("Conflicts", id="conflict_list")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = "Dependency Conflict Explorer"
        if self._document_path is not None:
            self._start_load(self._document_path)

    def on_key(self, event: Any) -> None:
        """Handle key events - specifically Enter on welcome screen."""
        if not self._main_started and event.key == "enter":
            event.prevent_default()
            event.stop()
            self.action_start_main()

    # Loading

    def _start_load(self, path: Path) -> None:
        """Read and index a document in a background thread."""
        if self._loading:
            return
        self._loading = True
        try:
            self.query_one("#welcome_loading").add_class("loading")
        except Exception:
            pass
        self._pending_path = path
        self.run_worker(
            lambda: DependencySession.from_file(path),
            thread=True,
            exit_on_error=False,
        )

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Swap in the new session only once it is completely built."""
        if event.state == WorkerState.SUCCESS:
            self._loading = False
            self._session = event.worker.result
            self._document_path = self._pending_path
            self._on_session_loaded()
        elif event.state == WorkerState.ERROR:
            self._loading = False
            self.notify(f"Error loading document: {event.worker.error}", severity="error", timeout=5)
            self._hide_loading()

    def _hide_loading(self) -> None:
        try:
            self.query_one("#welcome_loading").remove_class("loading")
        except Exception:
            pass

    def _on_session_loaded(self) -> None:
        self._hide_loading()
        stats = self._session.stats()
        try:
            hint = self.query_one("#welcome_hint", Static)
            hint.update(
                f"[green]✓[/] {stats.total_packages} packages, "
                f"[{COLOR_CONFLICT}]{stats.conflicted_packages}[/] with conflicts  ·  "
                "[cyan]Enter[/] to explore  ·  [dim]q[/] to quit"
            )
        except Exception:
            pass
        if self._main_started:
            self._load_main_view()

    def action_start_main(self) -> None:
        """Transition from welcome screen to main view."""
        if self._main_started:
            return
        self._main_started = True
        try:
            self.query_one("#welcome_container").styles.display = "none"
            self.query_one("#main_container").styles.display = "block"
        except Exception:
            pass
        self._load_main_view()

    def _clear_tree(self, tree: Tree) -> None:
        while tree.root.children:
            tree.root.children[0].remove()

    def _load_main_view(self) -> None:
        self._search_matches = []
        self._search_index = 0
        self._filter_name = None
        self._filter_index = -1
        self._filtered_labels = []
        tree = self.query_one("#dep_tree", Tree)
        self._clear_tree(tree)
        root = self._session.root
        if root is None:
            tree.root.label = f"[{COLOR_HEADER}]No document[/]"
            self._set_details("[dim]No document loaded. Press [bold]o[/bold] to open one.[/]")
            self._load_conflict_list()
            tree.focus()
            return
        conflicted = set(self._session.conflicts)
        tree.root.label = f"[{COLOR_HEADER}]{root.name}[/] [dim]v{root.version or '?'}[/]"
        tree.root.data = NodeRef(node=root, path=())
        _populate_textual_tree(tree.root, root, conflicted)
        _expand_to_depth(tree.root, EXPAND_DEPTH_DEFAULT)
        self._load_conflict_list()
        self._set_details(self._format_root())
        tree.focus()

    def _load_conflict_list(self) -> None:
        conflict_tree = self.query_one("#conflict_list", Tree)
        self._clear_tree(conflict_tree)
        entries = self._session.sort_conflicted_packages(self._sort_order)
        label = "name" if self._sort_order == "name" else "version count"
        conflict_tree.root.label = (
            f"[{COLOR_CONFLICT}]Conflicts ({len(entries)})[/] [dim]by {label}[/]"
        )
        for entry in entries:
            conflict_tree.root.add_leaf(
                f"{entry.name} [dim]({entry.version_count} versions)[/]",
                data=entry.name,
            )
        conflict_tree.root.expand()

    # Details

    def _format_root(self) -> str:
        root = self._session.root
        stats = self._session.stats()
        lines = [
            f"[{COLOR_HEADER}]Project[/]",
            f"  [{COLOR_PKG}]{root.name}[/]  [dim]v{root.version or '?'}[/]",
            f"  [dim]{self._document_path or ''}[/]",
            "",
            f"[{COLOR_HEADER}]Stats[/]",
            f"  Packages:              [{COLOR_STATS}]{stats.total_packages}[/]",
            f"  Occurrences:           [{COLOR_STATS}]{stats.total_occurrences}[/]",
            f"  With conflicts:        [{COLOR_CONFLICT}]{stats.conflicted_packages}[/]",
            f"  Tree nodes:            [{COLOR_STATS}]{_count_nodes(root)}[/]",
        ]
        return "\n".join(lines)

    def _format_node(self, ref: NodeRef) -> str:
        node = ref.node
        direct, total_desc, max_depth = _node_stats(node)
        details = self._session.package_details(node.name)
        lines = [
            f"[{COLOR_HEADER}]Package[/]",
            f"  [{COLOR_PKG}]{node.name}[/]  [dim]v{node.version or '?'}[/]",
            f"  [dim]{' → '.join(ref.path)}[/]",
            "",
            f"[{COLOR_HEADER}]Stats[/]",
            f"  Direct dependencies:   [{COLOR_STATS}]{direct}[/]",
            f"  Total descendants:     [{COLOR_STATS}]{total_desc}[/]",
            f"  Max depth from here:   [{COLOR_STATS}]{max_depth}[/] [dim]levels[/]",
            f"  Versions in tree:      [{COLOR_STATS}]{', '.join(details.versions)}[/]",
            "",
            f"[{COLOR_HEADER}]Version conflicts[/]",
            _format_conflict_detail(details.conflict),
        ]
        if details.conflict.has_conflicts:
            lines.append("\n[dim]v[/] = show only one version  ·  [dim]x[/] = clear filter")
        return "\n".join(lines)

    def _set_details(self, text: str) -> None:
        details = self.query_one("#details", Static)
        details.update(text)

    def _selected_ref(self) -> NodeRef | None:
        tree = self.query_one("#dep_tree", Tree)
        node = tree.cursor_node
        if node is None or not isinstance(node.data, NodeRef) or not node.data.path:
            return None
        return node.data

    def on_tree_node_selected(self, event: Tree.NodeSelected) -> None:
        data = event.node.data
        if data is None:
            return
        if isinstance(data, NodeRef):
            if data.path:
                self._set_details(self._format_node(data))
            else:
                self._set_details(self._format_root())
        elif isinstance(data, str):
            # Entry in the conflict list: jump to that package in the tree
            self._run_search(data, exact=True)

    # Search

    def action_search(self) -> None:
        """Open search modal."""
        if not self._main_started:
            return
        self.push_screen(SearchScreen(), self._on_search_done)

    def _on_search_done(self, query: str | None) -> None:
        if not query:
            return
        self._run_search(query)

    def _run_search(self, query: str, exact: bool = False) -> None:
        try:
            names = [query] if exact else self._session.search(query)
        except NoMatchError:
            self.notify(f"No packages found matching: {query}", severity="warning", timeout=2)
            return
        if not names:
            return
        wanted = set(names)
        tree = self.query_one("#dep_tree", Tree)
        self._search_matches = [
            tn
            for tn in _iter_tree_nodes(tree.root)
            if isinstance(tn.data, NodeRef) and tn.data.path and tn.data.node.name in wanted
        ]
        self._search_index = 0
        if not self._search_matches:
            self.notify(f"'{query}' is not shown in the tree", severity="warning", timeout=2)
            return
        if not exact:
            self.notify(
                f"{len(names)} package(s), {len(self._search_matches)} node(s) match '{query}'",
                severity="information",
                timeout=2,
            )
        self._goto_match(0)

    def _goto_match(self, index: int) -> None:
        """Navigate to and select a specific match."""
        if not self._search_matches:
            return
        self._search_index = index % len(self._search_matches)
        match_node = self._search_matches[self._search_index]
        self._expand_ancestors(match_node)
        tree = self.query_one("#dep_tree", Tree)
        tree.select_node(match_node)
        tree.scroll_to_node(match_node)
        tree.focus()
        if isinstance(match_node.data, NodeRef):
            self._set_details(self._format_node(match_node.data))

    def _expand_ancestors(self, node: TreeNode) -> None:
        """Expand all ancestor nodes to make the target visible."""
        ancestors = []
        parent = node.parent
        while parent is not None:
            ancestors.append(parent)
            parent = parent.parent
        for ancestor in reversed(ancestors):
            ancestor.expand()

    def action_next_match(self) -> None:
        """Go to next search match."""
        if not self._search_matches:
            self.notify("No active search. Press / to search.", severity="information", timeout=2)
            return
        self._goto_match(self._search_index + 1)

    def action_prev_match(self) -> None:
        """Go to previous search match."""
        if not self._search_matches:
            self.notify("No active search. Press / to search.", severity="information", timeout=2)
            return
        self._goto_match(self._search_index - 1)

    # Conflicts and version filter

    def action_toggle_sort(self) -> None:
        """Switch the conflict list between name order and version-count order."""
        if not self._main_started:
            return
        self._sort_order = "count" if self._sort_order == "name" else "name"
        self._load_conflict_list()

    def action_filter_version(self) -> None:
        """Highlight occurrences of the selected package at one version; repeat to cycle."""
        ref = self._selected_ref()
        name = ref.node.name if ref else self._filter_name
        if name is None:
            self.notify("Select a package first.", severity="information", timeout=2)
            return
        detail = self._session.list_conflicts(name)
        if not detail.has_conflicts:
            self.notify(f"No version conflicts for {name}.", severity="information", timeout=2)
            return
        versions = list(detail.groups)
        if name == self._filter_name:
            index = (self._filter_index + 1) % len(versions)
        else:
            index = 0
        self._apply_version_filter(name, versions[index])
        self._filter_index = index

    def _apply_version_filter(self, name: str, version: str) -> None:
        self._restore_filtered_labels()
        result = self._session.filter_by_version(name, version)
        matching = set(result.matching)
        conflicted = self._session.is_conflicted(name)
        tree = self.query_one("#dep_tree", Tree)
        for tn in _iter_tree_nodes(tree.root):
            ref = tn.data
            if not isinstance(ref, NodeRef) or not ref.path or ref.node.name != name:
                continue
            self._filtered_labels.append((tn, _node_label(ref.node, conflicted)))
            if ref.path in matching:
                tn.set_label(_node_label(ref.node, conflicted, style=COLOR_MATCH))
                self._expand_ancestors(tn)
            else:
                tn.set_label(_node_label(ref.node, conflicted, style=COLOR_DIM))
        self._filter_name = name
        self.notify(
            f"{name} v{version}: {len(result.matching)} matching, "
            f"{len(result.non_matching)} at other versions",
            severity="information",
            timeout=3,
        )

    def _restore_filtered_labels(self) -> None:
        for tn, label in self._filtered_labels:
            tn.set_label(label)
        self._filtered_labels = []

    def action_clear_filter(self) -> None:
        if self._filter_name is None:
            return
        self._restore_filtered_labels()
        self._filter_name = None
        self._filter_index = -1

    # Misc

    def action_open_file(self) -> None:
        """Open modal to choose a document."""
        self.push_screen(OpenFileScreen(), self._on_open_file_done)

    def _on_open_file_done(self, path: Path | None) -> None:
        if path is None:
            return
        self._start_load(path)

    def action_refresh(self) -> None:
        if self._document_path is not None:
            self._start_load(self._document_path)

    def action_expand_all(self) -> None:
        tree = self.query_one("#dep_tree", Tree)
        tree.root.expand_all()

    def action_collapse_all(self) -> None:
        tree = self.query_one("#dep_tree", Tree)
        tree.root.collapse_all()
        tree.root.expand()

    def action_toggle_details(self) -> None:
        """Toggle visibility of the details panel."""
        self._details_visible = not self._details_visible
        details = self.query_one("#details", Static)
        details.styles.display = "block" if self._details_visible else "none"

    def action_quit(self) -> None:
        self.exit()


def main() -> None:
    """Entry point for the depviz TUI."""
    path = None
    if len(sys.argv) > 1:
        path = sys.argv[1].strip()
    app = DepVizApp(document_path=path)
    app.run()


if __name__ == "__main__":
    main()
