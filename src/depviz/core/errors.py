"""Exceptions raised by the depviz engine."""

from __future__ import annotations


class DepvizError(Exception):
    """Base class for all engine errors."""


class MalformedInputError(DepvizError):
    """The dependency document failed structural validation."""

    def __init__(self, message: str, location: str = "") -> None:
        self.location = location
        if location:
            message = f"{location}: {message}"
        super().__init__(message)


class CycleDetectedError(DepvizError):
    """A node was reached again while it was still on its own ancestor path."""

    def __init__(self, path: list[str]) -> None:
        self.path = list(path)
        super().__init__("Dependency cycle: " + " -> ".join(self.path))


class NoMatchError(DepvizError):
    """A search term matched no package name."""

    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__(f"No packages found matching: {term}")
