"""Terminal width discovery.

The layout engine only ever sees an integer width; this module is where that
integer comes from when the caller does not supply one.
"""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)

COLUMNS_ENV = "PI_TABLE_COLUMNS"


def terminal_columns() -> int:
    """Return the available terminal width, or ``0`` when unknown.

    ``PI_TABLE_COLUMNS`` overrides detection. Without it the size of the
    terminal attached to stdout is used; when stdout is not a terminal the
    result is ``0`` (unconstrained).
    """
    override = os.environ.get(COLUMNS_ENV, "").strip()
    if override:
        try:
            return int(override)
        except ValueError:
            logger.warning("Ignoring %s=%r: not an integer", COLUMNS_ENV, override)

    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return 0
