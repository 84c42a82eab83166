"""Ordering of version labels.

Only dot-separated numeric versions ("1.2.10") are compared numerically, one
integer component at a time with missing trailing components read as 0, so
"1.2" == "1.2.0". There is no pre-release or build-metadata handling: any other
label ("1.0.0-beta.1", "latest", "") falls back to plain string comparison and
always orders below every numeric version.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import cmp_to_key

_NUMERIC_VERSION = re.compile(r"^\d+(\.\d+)*$")


def is_numeric_version(version: str) -> bool:
    """True if the label is purely dot-separated digits."""
    return bool(_NUMERIC_VERSION.match(version))


def _numeric_parts(version: str) -> list[int]:
    return [int(part) for part in version.split(".")]


def compare_versions(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` orders below, equal to, or above ``b``."""
    a_numeric = is_numeric_version(a)
    b_numeric = is_numeric_version(b)
    if a_numeric and b_numeric:
        a_parts = _numeric_parts(a)
        b_parts = _numeric_parts(b)
        width = max(len(a_parts), len(b_parts))
        a_parts += [0] * (width - len(a_parts))
        b_parts += [0] * (width - len(b_parts))
        return (a_parts > b_parts) - (a_parts < b_parts)
    if a_numeric != b_numeric:
        return 1 if a_numeric else -1
    return (a > b) - (a < b)


def sort_versions_desc(versions: Iterable[str]) -> list[str]:
    """Sort highest first; labels that compare equal keep their input order."""
    return sorted(versions, key=cmp_to_key(compare_versions), reverse=True)
