"""Border and column presentation options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

Align = Literal["left", "center", "right"]
VerticalAlign = Literal["top", "middle", "bottom"]

_ALIGNS: tuple[str, ...] = get_args(Align)
_VERTICAL_ALIGNS: tuple[str, ...] = get_args(VerticalAlign)


@dataclass(frozen=True)
class TableStyle:
    """Glyphs used to draw the grid."""

    vertical_border: str = "|"
    horizontal_border: str = "-"
    corner: str = "+"

    def __post_init__(self) -> None:
        if not self.horizontal_border:
            raise ValueError("horizontal_border must not be empty")


DEFAULT_TABLE_STYLE = TableStyle()

BOX_TABLE_STYLE = TableStyle(
    vertical_border="│",
    horizontal_border="─",
    corner="┼",
)


@dataclass(frozen=True)
class ColumnStyle:
    """Alignment and padding applied to every cell of a column.

    Padding is measured in display cells (horizontal) and lines (vertical).
    """

    align: Align = "left"
    vertical_align: VerticalAlign = "top"
    padding_left: int = 1
    padding_right: int = 1
    padding_top: int = 0
    padding_bottom: int = 0

    def __post_init__(self) -> None:
        if self.align not in _ALIGNS:
            raise ValueError(
                f"Unknown align {self.align!r}, expected one of {', '.join(_ALIGNS)}"
            )
        if self.vertical_align not in _VERTICAL_ALIGNS:
            raise ValueError(
                f"Unknown vertical_align {self.vertical_align!r}, "
                f"expected one of {', '.join(_VERTICAL_ALIGNS)}"
            )
        for name in ("padding_left", "padding_right", "padding_top", "padding_bottom"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

    @property
    def horizontal_padding(self) -> int:
        return self.padding_left + self.padding_right

    @property
    def vertical_padding(self) -> int:
        return self.padding_top + self.padding_bottom


DEFAULT_COLUMN_STYLE = ColumnStyle()
