"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

# Deepest nesting accepted before a document is rejected.
DEFAULT_MAX_DEPTH = 200
MAX_DEPTH_ENV = "DEPVIZ_MAX_DEPTH"


def get_max_depth() -> int:
    """Return the traversal depth limit, honouring DEPVIZ_MAX_DEPTH when valid."""
    raw = os.environ.get(MAX_DEPTH_ENV, "").strip()
    if not raw:
        return DEFAULT_MAX_DEPTH
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer)", MAX_DEPTH_ENV, raw)
        return DEFAULT_MAX_DEPTH
    if value < 1:
        logger.warning("Ignoring %s=%r (must be >= 1)", MAX_DEPTH_ENV, raw)
        return DEFAULT_MAX_DEPTH
    return value
