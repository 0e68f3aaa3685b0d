"""Tests for cli/output/table.py."""

from __future__ import annotations

import typing
from collections.abc import Callable

import pytest
from rich.console import Console
from rich.table import Column

from tablefit.cli.output.table import (
    JustifyMethod,
    OverflowMethod,
    Table,
    cell_text,
    paint,
    spread,
)
from tablefit.layout.cells import SEPARATOR, PlainCell, Row, StructuredCell


def _row(*texts: str) -> Row:
    return Row(tuple(PlainCell(text) for text in texts))


@pytest.mark.unit
class TestTableDefaults:
    """Tests that Table applies sensible defaults and delegates correctly to RichTable."""

    def test_add_column_uses_fold_overflow_by_default(self) -> None:
        table = Table()
        table.add_column("Name")
        col: Column = table.columns[0]
        assert col.overflow == "fold"

    def test_add_column_respects_explicit_overflow(self) -> None:
        table = Table()
        table.add_column("ID", overflow="ellipsis")
        assert table.columns[0].overflow == "ellipsis"

    def test_add_column_with_no_wrap_true(self) -> None:
        table = Table()
        table.add_column("Fixed", no_wrap=True)
        assert table.columns[0].no_wrap is True

    def test_add_column_with_min_max_width(self) -> None:
        table = Table()
        table.add_column("Bounded", min_width=5, max_width=30)
        col = table.columns[0]
        assert col.min_width == 5
        assert col.max_width == 30

    def test_type_aliases(self) -> None:
        assert set(typing.get_args(OverflowMethod)) == {"fold", "crop", "ellipsis", "ignore"}
        assert "right" in typing.get_args(JustifyMethod)


@pytest.mark.unit
class TestSpread:
    """Tests for laying cells out over painter columns."""

    def test_cell_text_parses_markup(self) -> None:
        text = cell_text(PlainCell("[bold]hi[/bold] :smile:"))
        assert text.plain == "hi :smile:"

    def test_short_row_is_padded(self) -> None:
        texts = spread(_row("a"), 3)
        assert [text.plain for text in texts] == ["a", "", ""]

    def test_spanning_cell_leaves_covered_columns_empty(self) -> None:
        row = Row((StructuredCell("wide", span=2), PlainCell("c")))
        assert [text.plain for text in spread(row, 3)] == ["wide", "", "c"]


@pytest.mark.unit
class TestPaint:
    """Tests for paint()."""

    def test_columns_follow_widths(self) -> None:
        table = paint([_row("A", "B")], [_row("1", "2")], {0: 4, 1: 6}, no_wrap=[1])
        assert [column.max_width for column in table.columns] == [4, 6]
        assert [column.no_wrap for column in table.columns] == [False, True]
        assert table.columns[0].header.plain == "A"  # type: ignore[union-attr]

    def test_no_headers_hides_header(self) -> None:
        table = paint([], [_row("1")], {0: 1})
        assert table.show_header is False
        assert table.row_count == 1

    def test_extra_header_rows_become_styled_rows(self) -> None:
        headers = [_row("Name", "Value"), _row("unit", "ms")]
        table = paint(headers, [_row("a", "1")], {0: 4, 1: 5})
        assert table.row_count == 2
        assert table.rows[0].style == table.header_style
        assert table.rows[0].end_section is True
        assert table.rows[1].end_section is False

    def test_separator_ends_section(self) -> None:
        table = paint([], [_row("a"), SEPARATOR, _row("b")], {0: 1})
        assert table.row_count == 2
        assert table.rows[0].end_section is True

    def test_title(self) -> None:
        assert paint([], [_row("a")], {0: 1}, title="Things").title == "Things"

    def test_renders_wrapped_lines(
        self, console: Console, read_output: Callable[[], str]
    ) -> None:
        table = paint([_row("Key", "Text")], [_row("k", "one\ntwo")], {0: 3, 1: 4})
        console.print(table)
        output = read_output()
        lines = output.splitlines()
        assert any("one" in line for line in lines)
        assert any("two" in line and "one" not in line for line in lines)
        assert max(len(line) for line in lines) == 3 + 4 + 7
