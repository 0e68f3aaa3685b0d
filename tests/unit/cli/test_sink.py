"""Tests for cli/output/sink.py."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from rich.console import Console

from tablefit.cli.output.sink import OutputSink, RichSink
from tablefit.cli.output.table import Table


def _table(text: str) -> Table:
    table = Table(show_header=False)
    table.add_column(no_wrap=True)
    table.add_row(text)
    return table


@pytest.mark.unit
class TestRichSink:
    """Tests for RichSink."""

    def test_implements_protocol(self, sink: RichSink) -> None:
        assert isinstance(sink, OutputSink)

    def test_width_comes_from_console(self, sink: RichSink) -> None:
        assert sink.width == 80

    def test_default_console(self) -> None:
        assert isinstance(RichSink().console, Console)

    def test_strip_markup(self, sink: RichSink) -> None:
        assert sink.strip_markup("[bold]a[/bold] \\[b]") == "a [b]"

    def test_measure(self, sink: RichSink) -> None:
        assert sink.measure("[red]abc[/red]\nab") == 3

    def test_write_text(self, sink: RichSink, read_output: Callable[[], str]) -> None:
        sink.write("hello")
        assert read_output() == "hello\n"

    def test_write_within_console_width(
        self, sink: RichSink, read_output: Callable[[], str]
    ) -> None:
        sink.write(_table("x" * 20), width=40)
        lines = read_output().splitlines()
        assert len(lines) == 3
        assert lines[1] == "│ " + "x" * 20 + " │"

    def test_write_wider_than_console_is_not_cropped(
        self, sink: RichSink, read_output: Callable[[], str]
    ) -> None:
        sink.write(_table("y" * 100), width=104)
        lines = read_output().splitlines()
        assert len(lines) == 3
        assert lines[1] == "│ " + "y" * 100 + " │"
        assert all(len(line) == 104 for line in lines)
