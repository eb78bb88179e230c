"""Table: owns columns and rows and drives layout and rendering."""

from __future__ import annotations

import sys
from itertools import islice
from typing import IO, Iterable, Sequence

from pi.table.layout import layout_table
from pi.table.render import render_grid
from pi.table.style import DEFAULT_TABLE_STYLE, TableStyle
from pi.table.terminal import terminal_columns
from pi.table.text import to_display_text
from pi.table.types import Cell, Column, Row


class Table:
    """A fixed set of named columns and a growing list of rows.

    The first row is always the header, built from the column names.
    Body rows are appended with :meth:`add_row`; :meth:`render` lays the
    whole table out for a given terminal width and returns the text.

    Usage::

        table = Table(["Name", "Age"])
        table.add_row(["Alice", 30])
        print(table.render(terminal_width=80), end="")
    """

    def __init__(self, names: Sequence[str], style: TableStyle | None = None) -> None:
        if isinstance(names, str):
            raise TypeError("names must be a sequence of column names, not a single str")
        names = list(names)

        self.style: TableStyle = style if style is not None else DEFAULT_TABLE_STYLE
        self._columns: list[Column] = []
        self._index: dict[str, int] = {}
        self._rows: list[Row] = []

        for position, name in enumerate(names):
            if not isinstance(name, str):
                raise TypeError(
                    f"Column name at position {position} must be str, "
                    f"got {type(name).__name__}"
                )
            if name in self._index:
                raise ValueError(f"Duplicate column name {name!r}")
            self._index[name] = len(self._columns)
            self._columns.append(Column(name))

        if not self._columns:
            raise ValueError("A table needs at least one column")

        self._append(names, is_header=True)

    # -- rows ---------------------------------------------------------------

    def _append(self, values: Iterable[object], is_header: bool = False) -> Row:
        texts = [to_display_text(v) for v in islice(values, len(self._columns))]
        texts.extend("" for _ in range(len(self._columns) - len(texts)))
        row = Row([Cell(text) for text in texts], is_header=is_header)
        self._rows.append(row)
        return row

    def add_row(self, values: Iterable[object]) -> Row:
        """Append a body row.

        Values beyond the column count are ignored; missing trailing values
        become empty cells.
        """
        return self._append(values)

    def add_rows(self, rows: Iterable[Iterable[object]]) -> None:
        for values in rows:
            self._append(values)

    def reset(self) -> None:
        """Drop every body row, keeping the header."""
        del self._rows[1:]

    @property
    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def header(self) -> Row:
        return self._rows[0]

    # -- columns ------------------------------------------------------------

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    def get_column_by_index(self, index: int) -> Column | None:
        if 0 <= index < len(self._columns):
            return self._columns[index]
        return None

    def get_column_by_name(self, name: str) -> Column | None:
        index = self._index.get(name)
        if index is None:
            return None
        return self._columns[index]

    # -- output -------------------------------------------------------------

    def render(self, terminal_width: int | None = None) -> str:
        """Lay out and return the table text.

        *terminal_width* of ``None`` or ``<= 0`` renders at natural width.
        """
        layout_table(self._columns, self._rows, self.style, terminal_width or 0)
        return render_grid(self._columns, self._rows, self.style)

    def print(self, terminal_width: int | None = None, file: IO[str] | None = None) -> None:
        """Write the rendered table to *file* (stdout by default).

        When *terminal_width* is ``None`` the width of the attached terminal
        is used.
        """
        if terminal_width is None:
            terminal_width = terminal_columns()
        out = file if file is not None else sys.stdout
        out.write(self.render(terminal_width))

    def __str__(self) -> str:
        return self.render()
