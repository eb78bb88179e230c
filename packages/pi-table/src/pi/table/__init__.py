"""pi-table: Fixed-width text tables that wrap to fit the terminal."""

# Styles
from pi.table.style import (
    BOX_TABLE_STYLE,
    DEFAULT_COLUMN_STYLE,
    DEFAULT_TABLE_STYLE,
    Align,
    ColumnStyle,
    TableStyle,
    VerticalAlign,
)

# Table orchestrator
from pi.table.table import Table

# Terminal width discovery
from pi.table.terminal import terminal_columns

# Display-unit helpers
from pi.table.text import display_width, take_columns, to_display_text

# Data holders
from pi.table.types import Cell, Column, Row

# Word wrapping
from pi.table.wrap import wrap_text

__all__ = [
    # Styles
    "Align",
    "BOX_TABLE_STYLE",
    "ColumnStyle",
    "DEFAULT_COLUMN_STYLE",
    "DEFAULT_TABLE_STYLE",
    "TableStyle",
    "VerticalAlign",
    # Table
    "Table",
    # Terminal
    "terminal_columns",
    # Text
    "display_width",
    "take_columns",
    "to_display_text",
    # Types
    "Cell",
    "Column",
    "Row",
    # Wrapping
    "wrap_text",
]
