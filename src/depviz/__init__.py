"""depviz: find packages installed at several versions in a dependency tree (library, TUI, CLI)."""

from importlib.metadata import version, PackageNotFoundError

from depviz.api import (
    analyze,
    open_session,
    DependencyNode,
    DependencySession,
    DepvizError,
    MalformedInputError,
    CycleDetectedError,
    NoMatchError,
)

__all__ = [
    "analyze",
    "open_session",
    "DependencyNode",
    "DependencySession",
    "DepvizError",
    "MalformedInputError",
    "CycleDetectedError",
    "NoMatchError",
    "__version__",
]

try:
    __version__ = version("depviz")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed as package
