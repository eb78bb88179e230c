"""Tests for the Table orchestrator -- rows, columns, reset and printing."""

from __future__ import annotations

import io

import pytest

from pi.table.style import DEFAULT_TABLE_STYLE, BOX_TABLE_STYLE
from pi.table.table import Table
from pi.table.terminal import COLUMNS_ENV


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_header_row_built_from_names(self, people) -> None:
        header = people.header
        assert header.is_header
        assert [cell.data for cell in header.cells] == ["Name", "Age"]
        assert people.rows[0] is header

    def test_columns_follow_names(self, people) -> None:
        assert [column.name for column in people.columns] == ["Name", "Age"]

    def test_default_style(self, people) -> None:
        assert people.style is DEFAULT_TABLE_STYLE

    def test_custom_style(self) -> None:
        assert Table(["a"], style=BOX_TABLE_STYLE).style is BOX_TABLE_STYLE

    def test_accepts_any_iterable_of_names(self) -> None:
        table = Table(name for name in ("a", "b"))
        assert [column.name for column in table.columns] == ["a", "b"]
        assert len(table.header.cells) == 2

    def test_non_string_name_rejected(self) -> None:
        with pytest.raises(TypeError, match="position 1"):
            Table(["Name", 42])  # type: ignore[list-item]

    def test_single_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            Table("Name")

    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            Table(["a", "a"])

    def test_no_columns_rejected(self) -> None:
        with pytest.raises(ValueError):
            Table([])


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


class TestAddRow:
    def test_every_row_has_one_cell_per_column(self) -> None:
        table = Table(["a", "b", "c"])
        for values in ([], ["1"], ["1", "2"], ["1", "2", "3"], ["1", "2", "3", "4", "5"]):
            row = table.add_row(values)
            assert len(row.cells) == 3

    def test_missing_values_are_empty(self, people) -> None:
        row = people.add_row(["Bob"])
        assert [cell.data for cell in row.cells] == ["Bob", ""]

    def test_extra_values_dropped(self, people) -> None:
        row = people.add_row(["Carol", 41, "extra"])
        assert [cell.data for cell in row.cells] == ["Carol", "41"]

    def test_values_stringified(self, people) -> None:
        row = people.add_row([None, 3.5])
        assert [cell.data for cell in row.cells] == ["", "3.5"]

    def test_add_rows(self, people) -> None:
        people.add_rows([["Bob", 1], ["Carol", 2]])
        assert len(people.rows) == 4
        assert not any(row.is_header for row in people.rows[1:])


# ---------------------------------------------------------------------------
# Column lookup
# ---------------------------------------------------------------------------


class TestColumnLookup:
    def test_by_name(self, people) -> None:
        assert people.get_column_by_name("Age") is people.columns[1]

    def test_missing_name(self, people) -> None:
        assert people.get_column_by_name("Missing") is None

    def test_by_index(self, people) -> None:
        assert people.get_column_by_index(0).name == "Name"

    def test_index_out_of_range(self, people) -> None:
        assert people.get_column_by_index(2) is None
        assert people.get_column_by_index(-1) is None

    def test_name_and_index_agree(self, people) -> None:
        for index, column in enumerate(people.columns):
            assert people.get_column_by_name(column.name) is people.get_column_by_index(index)


# ---------------------------------------------------------------------------
# Reset and idempotence
# ---------------------------------------------------------------------------


class TestReset:
    def test_reset_keeps_only_header(self, people) -> None:
        people.add_row(["Bob"])
        people.reset()
        assert len(people.rows) == 1
        assert people.rows[0].is_header

    def test_readding_rows_reproduces_render(self, people) -> None:
        before = people.render()
        people.reset()
        people.add_row(["Alice", "30"])
        assert people.render() == before

    def test_reset_on_header_only_table(self) -> None:
        table = Table(["a"])
        table.reset()
        assert len(table.rows) == 1


class TestIdempotence:
    def test_same_width_same_output(self, notes) -> None:
        assert notes.render(24) == notes.render(24)

    def test_no_stale_widths_between_sizes(self, notes) -> None:
        natural = notes.render()
        notes.render(24)
        assert notes.render() == natural

    def test_str_renders_unconstrained(self, people) -> None:
        assert str(people) == people.render()


# ---------------------------------------------------------------------------
# print
# ---------------------------------------------------------------------------


class TestPrint:
    def test_prints_to_stdout(self, people, capsys) -> None:
        people.print(terminal_width=0)
        assert capsys.readouterr().out == people.render()

    def test_prints_to_file(self, notes) -> None:
        buf = io.StringIO()
        notes.print(terminal_width=24, file=buf)
        assert buf.getvalue() == notes.render(24)

    def test_discovers_terminal_width(self, notes, monkeypatch) -> None:
        monkeypatch.setenv(COLUMNS_ENV, "24")
        buf = io.StringIO()
        notes.print(file=buf)
        assert buf.getvalue() == notes.render(24)
