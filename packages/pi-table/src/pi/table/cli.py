"""CLI entry point for pi-table. Uses Click for argument parsing."""

from __future__ import annotations

import csv
import logging
from dataclasses import replace
from typing import get_args

import click

from pi.table.style import BOX_TABLE_STYLE, DEFAULT_TABLE_STYLE, Align, ColumnStyle, VerticalAlign
from pi.table.table import Table

_BORDERS = {"ascii": DEFAULT_TABLE_STYLE, "box": BOX_TABLE_STYLE}


def _parse_delimiter(ctx, param, value: str) -> str:
    if value in ("\\t", "tab"):
        return "\t"
    if len(value) != 1:
        raise click.BadParameter("must be a single character")
    return value


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "-d", "--delimiter", default=",", show_default=True, callback=_parse_delimiter,
    help="Field delimiter ('\\t' or 'tab' for tabs)",
)
@click.option(
    "-w", "--width", type=int, default=None,
    help="Terminal width to fit (0 = unconstrained, default: detect)",
)
@click.option("--align", type=click.Choice(get_args(Align)), default="left", show_default=True)
@click.option(
    "--header-align", type=click.Choice(get_args(Align)), default=None,
    help="Alignment for the header row (default: same as --align)",
)
@click.option(
    "--valign", type=click.Choice(get_args(VerticalAlign)), default="top", show_default=True
)
@click.option("--padding", type=click.IntRange(min=0), default=1, show_default=True)
@click.option("--border", type=click.Choice(sorted(_BORDERS)), default="ascii", show_default=True)
@click.option(
    "--log-level", default="warning", show_default=True,
    type=click.Choice(["debug", "info", "warning", "error"]),
)
def main(source, delimiter, width, align, header_align, valign, padding, border, log_level):
    """Render delimited text from SOURCE (default: stdin) as a table.

    The first record is the header.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    records = [record for record in csv.reader(source, delimiter=delimiter) if record]
    if not records:
        raise click.ClickException("No input records")

    try:
        table = Table(records[0], style=_BORDERS[border])
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    style = ColumnStyle(
        align=align, vertical_align=valign, padding_left=padding, padding_right=padding
    )
    header_style = replace(style, align=header_align) if header_align else None
    for column in table.columns:
        column.style = style
        column.header_style = header_style

    table.add_rows(records[1:])
    table.print(terminal_width=width)


if __name__ == "__main__":
    main()
