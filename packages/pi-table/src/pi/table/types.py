"""Cell, Row and Column data holders.

Layout state (``Cell.parts``, ``Row.height``, ``Column.width``) is derived
and rewritten on every render; nothing here computes layout itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pi.table.style import DEFAULT_COLUMN_STYLE, ColumnStyle
from pi.table.text import display_width


@dataclass
class Cell:
    """A single datum's text plus its measured display width."""

    data: str
    width: int = field(init=False)
    parts: list[str] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.width = display_width(self.data)

    @property
    def wrapped(self) -> bool:
        return len(self.parts) > 1

    @property
    def lines(self) -> list[str]:
        """Lines the cell occupies when drawn."""
        return self.parts if self.parts else [self.data]


@dataclass
class Row:
    """An ordered sequence of cells sharing one rendered height."""

    cells: list[Cell]
    is_header: bool = False
    height: int = field(default=1, init=False)


@dataclass
class Column:
    """A named slot with a display width and presentation styles."""

    name: str
    style: ColumnStyle = DEFAULT_COLUMN_STYLE
    header_style: ColumnStyle | None = None
    width: int = field(default=0, init=False)
