"""Grid emission: borders, padding and alignment."""

from __future__ import annotations

from typing import Sequence

from pi.table.layout import content_start, resolve_style
from pi.table.style import Align, ColumnStyle, TableStyle
from pi.table.text import display_width, take_columns
from pi.table.types import Cell, Column, Row

EOL = "\n"
WS = " "


def _fill(glyph: str, width: int) -> str:
    """Repeat *glyph* to exactly *width* display cells."""
    if width <= 0:
        return ""
    glyph_width = max(display_width(glyph), 1)
    repeated = take_columns(glyph * -(-width // glyph_width), width)
    return repeated + WS * (width - display_width(repeated))


def align_text(text: str, width: int, align: Align) -> str:
    """Pad *text* with spaces to *width* cells according to *align*."""
    text_width = display_width(text)
    if text_width > width:
        text = take_columns(text, width)
        text_width = display_width(text)

    diff = width - text_width
    if align == "right":
        return WS * diff + text
    if align == "center":
        side = diff // 2
        return WS * side + text + WS * (diff - side)
    return text + WS * diff


def divider_line(columns: Sequence[Column], style: TableStyle) -> str:
    border_width = display_width(style.vertical_border)
    corner_width = display_width(style.corner)
    parts: list[str] = []
    for column in columns:
        parts.append(style.corner)
        parts.append(_fill(style.horizontal_border, border_width + column.width - corner_width))
    parts.append(style.corner)
    return "".join(parts)


def _cell_line(
    column: Column, cell: Cell, style: ColumnStyle, row_height: int, index: int
) -> str:
    lines = cell.lines
    start = content_start(style, row_height, len(lines))
    if not start <= index < start + len(lines):
        return WS * column.width

    usable = max(column.width - style.horizontal_padding, 0)
    return (
        WS * style.padding_left
        + align_text(lines[index - start], usable, style.align)
        + WS * style.padding_right
    )


def row_lines(columns: Sequence[Column], row: Row, style: TableStyle) -> list[str]:
    """Render the content lines of one row (no dividers)."""
    styles = [resolve_style(column, row) for column in columns]
    result: list[str] = []
    for index in range(row.height):
        parts = [style.vertical_border]
        for column, cell, column_style in zip(columns, row.cells, styles):
            parts.append(_cell_line(column, cell, column_style, row.height, index))
            parts.append(style.vertical_border)
        result.append("".join(parts))
    return result


def render_grid(columns: Sequence[Column], rows: Sequence[Row], style: TableStyle) -> str:
    """Emit the laid-out table as text, one divider above every row."""
    divider = divider_line(columns, style)
    lines: list[str] = []
    for row in rows:
        lines.append(divider)
        lines.extend(row_lines(columns, row, style))
    lines.append(divider)
    return EOL.join(lines) + EOL
