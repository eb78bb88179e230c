"""Column measurement, proportional shrinking, and row-height reconciliation.

The layout pipeline run before every render:

1. :func:`measure_columns` sizes each column to its widest cell plus padding.
2. If the table is wider than the terminal, :func:`shrink_columns` takes the
   overflow out of the columns and :func:`reflow_rows` wraps every cell that
   no longer fits.
3. :func:`compute_row_heights` derives each row's height from its cells.

All layout state lives on the columns, rows and cells and is rewritten from
scratch on each pass, so repeated renders never see stale decisions.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from pi.table.style import ColumnStyle, TableStyle
from pi.table.text import display_width
from pi.table.types import Column, Row
from pi.table.wrap import wrap_text

logger = logging.getLogger(__name__)

# Extra cells taken off on top of the measured overflow.
SHRINK_MARGIN = 5


def resolve_style(column: Column, row: Row) -> ColumnStyle:
    """Return the style that applies to *column*'s cell in *row*."""
    if row.is_header and column.header_style is not None:
        return column.header_style
    return column.style


def min_column_width(column: Column) -> int:
    """Smallest width that still leaves one usable cell for content."""
    padding = column.style.horizontal_padding
    if column.header_style is not None:
        padding = max(padding, column.header_style.horizontal_padding)
    return padding + 1


def table_width(columns: Sequence[Column], border_width: int) -> int:
    """Full rendered width: column widths plus one border per edge."""
    return sum(column.width for column in columns) + border_width * (len(columns) + 1)


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------


def measure_columns(columns: Sequence[Column], rows: Sequence[Row]) -> None:
    """Set every column to its natural width."""
    for column in columns:
        column.width = 0

    for row in rows:
        for column, cell in zip(columns, row.cells):
            needed = cell.width + resolve_style(column, row).horizontal_padding
            if needed > column.width:
                column.width = needed


# ---------------------------------------------------------------------------
# Shrinking
# ---------------------------------------------------------------------------


def shrink_columns(
    columns: Sequence[Column], terminal_width: int, border_width: int
) -> bool:
    """Reduce column widths so the table fits in *terminal_width*.

    Returns ``True`` when any shrinking was applied. A *terminal_width* of
    zero or less means unconstrained.

    The reduction is a heuristic, not an exact fit. Walking the columns in
    order, each column's share of the total content width is accumulated
    into a running percentage; a column that is still wider than the mean
    gives up that cumulative percentage of the remaining excess. Whatever
    rounding leaves over comes off the widest column. Columns are then
    clamped to :func:`min_column_width`, and if the clamp pushed the table
    back over the limit the widest columns are trimmed one cell at a time
    until it fits or every column is at its minimum.
    """
    if terminal_width <= 0 or not columns:
        return False

    full_width = table_width(columns, border_width)
    if full_width <= terminal_width:
        return False

    content_width = sum(column.width for column in columns)
    if content_width <= 0:
        return False

    excess = full_width - terminal_width + SHRINK_MARGIN
    initial_excess = excess
    mean_width = content_width / len(columns)
    logger.debug(
        "Table is %d cells wide, terminal has %d; removing %d",
        full_width,
        terminal_width,
        excess,
    )

    cumulative_rate = 0.0
    widest = columns[0]
    for column in columns:
        cumulative_rate += 100 * column.width / content_width
        if column.width + (initial_excess - excess) > mean_width:
            deduction = math.floor(excess * cumulative_rate / 100)
            column.width -= deduction
            excess -= deduction
        if column.width > widest.width:
            widest = column

    if excess > 0:
        widest.width -= excess

    for column in columns:
        floor_width = min_column_width(column)
        if column.width < floor_width:
            logger.debug(
                "Clamping column %r from %d to %d", column.name, column.width, floor_width
            )
            column.width = floor_width

    overflow = table_width(columns, border_width) - terminal_width
    while overflow > 0:
        candidates = [c for c in columns if c.width > min_column_width(c)]
        if not candidates:
            logger.debug("Table still %d cells too wide at minimum widths", overflow)
            break
        max(candidates, key=lambda c: c.width).width -= 1
        overflow -= 1

    return True


# ---------------------------------------------------------------------------
# Wrapping and heights
# ---------------------------------------------------------------------------


def reset_cells(rows: Sequence[Row]) -> None:
    for row in rows:
        for cell in row.cells:
            cell.parts = []


def reflow_rows(columns: Sequence[Column], rows: Sequence[Row]) -> None:
    """Wrap every cell that is wider than its column's usable width."""
    for row in rows:
        for column, cell in zip(columns, row.cells):
            usable = max(column.width - resolve_style(column, row).horizontal_padding, 1)
            if cell.width > usable:
                cell.parts = wrap_text(cell.data, usable) or [""]


def compute_row_heights(columns: Sequence[Column], rows: Sequence[Row]) -> None:
    for row in rows:
        height = 1
        for column, cell in zip(columns, row.cells):
            needed = len(cell.lines) + resolve_style(column, row).vertical_padding
            if needed > height:
                height = needed
        row.height = height


def content_start(style: ColumnStyle, row_height: int, line_count: int) -> int:
    """Index of the row line where a cell's first content line goes."""
    inner = row_height - style.vertical_padding
    if style.vertical_align == "middle":
        return style.padding_top + (inner - line_count) // 2
    if style.vertical_align == "bottom":
        return row_height - style.padding_bottom - line_count
    return style.padding_top


def layout_table(
    columns: Sequence[Column],
    rows: Sequence[Row],
    style: TableStyle,
    terminal_width: int,
) -> None:
    """Run the full layout pipeline in place."""
    reset_cells(rows)
    measure_columns(columns, rows)
    if shrink_columns(columns, terminal_width, display_width(style.vertical_border)):
        reflow_rows(columns, rows)
    compute_row_heights(columns, rows)
