"""Command-line interface for depviz: show trees, conflicts, search and version filters."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from depviz.core.errors import DepvizError, NoMatchError
from depviz.core.query import SORT_ORDERS
from depviz.core.session import DependencySession
from depviz.core.tree import DependencyNode

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _print_tree_text(
    node: DependencyNode,
    conflicted: set[str] | frozenset[str] = frozenset(),
    prefix: str = "",
    is_root: bool = True,
) -> None:
    """Print a dependency tree as indented text, marking conflicted packages with '!'."""
    if is_root:
        print(f"{node.name} ({node.version})" if node.version else node.name)
    children = node.children
    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        marker = "└── " if is_last else "├── "
        flag = " [!]" if child.name in conflicted else ""
        version = f" ({child.version})" if child.version else ""
        print(f"{prefix}{marker}{child.name}{version}{flag}")
        _print_tree_text(
            child,
            conflicted,
            prefix + ("    " if is_last else "│   "),
            is_root=False,
        )


def _open(path: str) -> DependencySession | None:
    """Load a session, reporting input errors on stderr."""
    try:
        return DependencySession.from_file(path)
    except DepvizError as e:
        print(f"Error loading {path}: {e}", file=sys.stderr)
        return None


def _format_path(path: tuple[str, ...] | list[str]) -> str:
    return " → ".join(path)


def cmd_tree(args: argparse.Namespace) -> int:
    """Show the dependency tree of a document."""
    session = _open(args.file)
    if session is None:
        return 1
    try:
        if args.json:
            print(json.dumps(session.root.to_dict(), indent=2))
        else:
            _print_tree_text(session.root, conflicted=set(session.conflicts))
    except RecursionError:
        print(
            f"Error: {args.file} is nested too deeply to print; lower DEPVIZ_MAX_DEPTH",
            file=sys.stderr,
        )
        return 1
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Show package and conflict counts."""
    session = _open(args.file)
    if session is None:
        return 1
    stats = session.stats()
    if args.json:
        print(json.dumps(stats.to_dict(), indent=2))
    else:
        print(f"Packages:    {stats.total_packages}")
        print(f"Occurrences: {stats.total_occurrences}")
        print(f"Conflicted:  {stats.conflicted_packages}")
    return 0


def cmd_conflicts(args: argparse.Namespace) -> int:
    """List packages that appear with more than one version."""
    session = _open(args.file)
    if session is None:
        return 1
    entries = session.sort_conflicted_packages(args.sort)
    if args.json:
        print(json.dumps([e.to_dict() for e in entries], indent=2))
        return 0
    if not entries:
        print("No version conflicts found.")
        return 0
    total = session.stats().total_packages
    print(f"{len(entries)} of {total} package(s) have version conflicts:\n")
    for entry in entries:
        print(f"  {entry.name} ({entry.version_count} versions): {', '.join(entry.versions)}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Show where each version of a package occurs."""
    session = _open(args.file)
    if session is None:
        return 1
    detail = session.list_conflicts(args.package)
    if args.json:
        print(json.dumps(detail.to_dict(), indent=2))
        return 0
    if not detail.has_conflicts:
        print(f"No version conflicts for {args.package}.")
        return 0
    print(
        f"Found {detail.total_occurrences} instances of {detail.name} "
        f"with {detail.distinct_versions} different versions:\n"
    )
    for version, paths in detail.groups.items():
        print(f"  Version {version} ({len(paths)} instances)")
        if args.verbose:
            for path in paths:
                print(f"    - {_format_path(path)}")
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    """Search package names."""
    session = _open(args.file)
    if session is None:
        return 1
    try:
        matches = session.search(args.term)
    except NoMatchError as e:
        print(str(e), file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(matches, indent=2))
        return 0
    for name in matches:
        flag = " [!]" if session.is_conflicted(name) else ""
        print(f"{name}{flag}")
    return 0


def cmd_filter(args: argparse.Namespace) -> int:
    """Show which occurrences of a package carry a given version."""
    session = _open(args.file)
    if session is None:
        return 1
    result = session.filter_by_version(args.package, args.version)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0
    if not result.matching and not result.non_matching:
        print(f"Package not found: {args.package}", file=sys.stderr)
        return 1
    print(f"{args.package} v{args.version}: {len(result.matching)} matching\n")
    for path in result.matching:
        print(f"  + {_format_path(path)}")
    if args.verbose:
        for path in result.non_matching:
            print(f"  - {_format_path(path)}")
    elif result.non_matching:
        print(f"\n  ({len(result.non_matching)} occurrences at other versions; -v to list)")
    return 0


def cmd_tui(args: argparse.Namespace) -> int:
    """Launch the interactive TUI."""
    from depviz.tui.app import DepVizApp

    app = DepVizApp(document_path=getattr(args, "file", None))
    app.run()
    return 0


def _add_file_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        help="Dependency JSON document (e.g. output of 'npm ls --all --json'); '-' reads stdin",
    )


def _add_json_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the depviz CLI."""
    parser = argparse.ArgumentParser(
        prog="depviz",
        description="Find packages that appear with more than one version in a dependency tree.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity on stderr (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # depviz tree
    tree_parser = subparsers.add_parser(
        "tree",
        help="Show the dependency tree",
        description="Print the dependency tree; conflicted packages are marked with [!].",
    )
    _add_file_argument(tree_parser)
    _add_json_argument(tree_parser)
    tree_parser.set_defaults(func=cmd_tree)

    # depviz stats
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show package and conflict counts",
        description="Count distinct packages, occurrences and conflicted packages.",
    )
    _add_file_argument(stats_parser)
    _add_json_argument(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    # depviz conflicts
    conflicts_parser = subparsers.add_parser(
        "conflicts",
        help="List packages with more than one version",
        description="List every package that appears with more than one distinct version.",
    )
    _add_file_argument(conflicts_parser)
    conflicts_parser.add_argument(
        "-s",
        "--sort",
        choices=SORT_ORDERS,
        default="name",
        help="Sort by name or by number of versions (default: name)",
    )
    _add_json_argument(conflicts_parser)
    conflicts_parser.set_defaults(func=cmd_conflicts)

    # depviz show
    show_parser = subparsers.add_parser(
        "show",
        help="Show the versions of a package and where they occur",
        description="Group every occurrence of a package by version, highest version first.",
    )
    _add_file_argument(show_parser)
    show_parser.add_argument("package", help="Package name")
    show_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="List the dependency path of every occurrence",
    )
    _add_json_argument(show_parser)
    show_parser.set_defaults(func=cmd_show)

    # depviz search
    search_parser = subparsers.add_parser(
        "search",
        help="Search package names",
        description="Case-insensitive substring search over package names.",
    )
    _add_file_argument(search_parser)
    search_parser.add_argument("term", help="Text to look for in package names")
    _add_json_argument(search_parser)
    search_parser.set_defaults(func=cmd_search)

    # depviz filter
    filter_parser = subparsers.add_parser(
        "filter",
        help="Show occurrences of a package at one version",
        description="Split the occurrences of a package into those at VERSION and the rest.",
    )
    _add_file_argument(filter_parser)
    filter_parser.add_argument("package", help="Package name")
    filter_parser.add_argument("version", help="Version to match exactly")
    filter_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also list occurrences at other versions",
    )
    _add_json_argument(filter_parser)
    filter_parser.set_defaults(func=cmd_filter)

    # depviz tui (default if no command)
    tui_parser = subparsers.add_parser(
        "tui",
        help="Launch the interactive terminal UI",
        description="Start the interactive TUI for browsing a dependency document.",
    )
    tui_parser.add_argument(
        "file",
        nargs="?",
        help="Optional: start with this document loaded",
    )
    tui_parser.set_defaults(func=cmd_tui)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Default to TUI if no command specified
    if args.command is None:
        return cmd_tui(argparse.Namespace(file=None))

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
