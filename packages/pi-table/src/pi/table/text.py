"""Display-unit measurement for cell text.

Provides functions for measuring how many terminal cells a string occupies,
taking a width-bounded prefix of a string, and converting row values into
display text.
"""

from __future__ import annotations

import unicodedata

import grapheme
import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512

TAB_WIDTH = 3


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def _is_printable_ascii(text: str) -> bool:
    for ch in text:
        cp = ord(ch)
        if cp < 0x20 or cp > 0x7E:
            return False
    return True


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (VS16, ZWJ sequences, skin tones, flags) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if g == "\t":
            return TAB_WIDTH
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


# ---------------------------------------------------------------------------
# display_width / take_columns
# ---------------------------------------------------------------------------


def display_width(text: str) -> int:
    """Calculate how many terminal cells *text* occupies.

    * Tabs count as 3 cells.
    * Uses a fast path for printable ASCII.
    * Caches results for everything else.
    """
    if not text:
        return 0

    if _is_printable_ascii(text):
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(text):
        total += grapheme_width(g)

    return _cache_width(text, total)


def take_columns(text: str, max_cols: int) -> str:
    """Return the longest prefix of *text* that fits in *max_cols* cells.

    Grapheme clusters are never split; a wide cluster that would overshoot
    the limit is dropped together with everything after it.
    """
    if max_cols <= 0:
        return ""

    if _is_printable_ascii(text):
        return text[:max_cols]

    result: list[str] = []
    used = 0
    for g in grapheme.graphemes(text):
        w = grapheme_width(g)
        if used + w > max_cols:
            break
        result.append(g)
        used += w
    return "".join(result)


# ---------------------------------------------------------------------------
# Value conversion
# ---------------------------------------------------------------------------


def to_display_text(value: object) -> str:
    """Convert a row value into the single-line text stored in a cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, str):
        text = value
    else:
        text = str(value)
    # Cells hold one paragraph; line breaks would corrupt the grid.
    return text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ").replace("\t", " ")
