"""Greedy word wrapping of cell text."""

from __future__ import annotations

import logging

from pi.table.text import display_width, take_columns

logger = logging.getLogger(__name__)

WS = " "


def wrap_text(text: str, width: int) -> list[str]:
    """Split *text* into lines no wider than *width* display cells.

    Words are separated by single spaces and never split, with one
    exception: a word wider than *width* is cut to ``width - 1`` cells and
    placed on its own line, and the rest of that word is dropped.

    Runs of spaces collapse, so joining the result with single spaces gives
    back the input with its whitespace normalized (when nothing was cut).
    """
    width = max(width, 1)

    lines: list[str] = []
    buf: list[str] = []
    # Width of the buffered words including one separator after each.
    used = 0

    for token in text.split(WS):
        if not token:
            continue

        token_width = display_width(token)

        if token_width > width:
            if buf:
                lines.append(WS.join(buf))
                buf = []
                used = 0
            kept = take_columns(token, max(width - 1, 1))
            logger.debug(
                "Truncated %r to %r to fit %d cells", token, kept, width
            )
            lines.append(kept)
            continue

        if used + token_width < width:
            buf.append(token)
            used += token_width + 1
        else:
            if buf:
                lines.append(WS.join(buf))
            buf = [token]
            used = token_width + 1

    if buf:
        lines.append(WS.join(buf))

    return lines
