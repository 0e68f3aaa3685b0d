"""Tables that adapt to the terminal width.

``AdaptiveTable`` collects headers and rows, plans the width of every column
so the table fits a maximum width, word-wraps the cells that are too wide and
hands the result to a Rich table for painting.

Usage:
    from tablefit.cli.output import AdaptiveTable, StructuredCell

    table = AdaptiveTable(max_width=60)
    table.set_headers(["Name", "Description"])
    table.add_row([StructuredCell("db-main", wrappable=False), "Primary database"])
    table.render()
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from typing import Any

from tablefit.cli.output.sink import OutputSink, RichSink
from tablefit.cli.output.table import Table, paint
from tablefit.layout.cells import (
    SEPARATOR,
    Cell,
    Row,
    RowLike,
    body_rows,
    to_header_rows,
    to_row,
)
from tablefit.layout.planner import (
    DEFAULT_MIN_COLUMN_WIDTH,
    BorderMetrics,
    compute_column_widths,
)
from tablefit.layout.wrapper import wrap
from tablefit.logging.config import get_logger

logger = get_logger(__name__)


class AdaptiveTable:
    """A table whose columns are sized and wrapped to fit a maximum width.

    The maximum width defaults to the width of the sink, read once when the
    table is created. An instance must not be modified while it renders.
    """

    def __init__(
        self,
        sink: OutputSink | None = None,
        max_width: int | None = None,
        min_column_width: int = DEFAULT_MIN_COLUMN_WIDTH,
        *,
        title: str | None = None,
        border: BorderMetrics | None = None,
    ) -> None:
        """Initialize the table.

        Args:
            sink: Where the table is written. Defaults to a Rich console.
            max_width: Maximum table width, borders included.
            min_column_width: Width below which wrappable columns are not squeezed.
            title: Optional title painted above the table.
            border: Border and padding widths of the painter.
        """
        self.sink = sink if sink is not None else RichSink()
        self.max_width = max_width if max_width is not None else self.sink.width
        self.min_column_width = min_column_width
        self.title = title
        self.border = border or BorderMetrics()
        self._headers: list[Row] = []
        self._rows: list[RowLike] = []

    @property
    def headers(self) -> tuple[Row, ...]:
        return tuple(self._headers)

    @property
    def rows(self) -> tuple[RowLike, ...]:
        return tuple(self._rows)

    def set_headers(self, headers: Sequence[Any]) -> AdaptiveTable:
        """Set the header rows: one row of cell values, or a list of rows."""
        self._headers = to_header_rows(headers)
        return self

    def add_row(self, row: Any) -> AdaptiveTable:
        """Append a row of cell values, a ``Row`` or a separator.

        Raises:
            InvalidRowError: If ``row`` is not a recognised row shape.
        """
        self._rows.append(to_row(row))
        return self

    def add_rows(self, rows: Iterable[Any]) -> AdaptiveTable:
        for row in rows:
            self.add_row(row)
        return self

    def add_separator(self) -> AdaptiveTable:
        self._rows.append(SEPARATOR)
        return self

    def column_widths(self) -> dict[int, int]:
        """Target content width of every column."""
        return compute_column_widths(
            self._headers,
            self._rows,
            self.max_width,
            self.min_column_width,
            self.border,
            self.sink.measure,
        )

    def adapted_rows(self, widths: dict[int, int] | None = None) -> list[RowLike]:
        """Body rows with every overlong wrappable cell word-wrapped.

        A spanning cell is painted in, and wrapped to, the first column it
        covers.
        """
        if widths is None:
            widths = self.column_widths()

        adapted: list[RowLike] = []
        for row in self._rows:
            if not isinstance(row, Row):
                adapted.append(row)
                continue
            cells: list[Cell] = []
            column = 0
            for cell in row:
                limit = widths[column]
                if cell.wrappable and self.sink.measure(cell.text) > limit:
                    cell = dataclasses.replace(cell, text=wrap(cell.text, limit))
                cells.append(cell)
                column += cell.span
            adapted.append(Row(tuple(cells)))
        return adapted

    def no_wrap_columns(self) -> list[int]:
        """Indexes of columns painting at least one non-wrappable cell."""
        columns: set[int] = set()
        for row in [*self._headers, *body_rows(self._rows)]:
            column = 0
            for cell in row:
                if not cell.wrappable:
                    columns.add(column)
                column += cell.span
        return sorted(columns)

    def table_width(self, widths: dict[int, int]) -> int:
        """Total painted width for the given column widths."""
        return sum(widths.values()) + self.border.overhead(len(widths))

    def build(self, widths: dict[int, int] | None = None) -> Table | None:
        """Lay out and wrap the table, returning the painted Rich table.

        Returns None when the table has no columns.
        """
        if widths is None:
            widths = self.column_widths()
        if not widths:
            return None
        return paint(
            self._headers,
            self.adapted_rows(widths),
            widths,
            title=self.title,
            no_wrap=self.no_wrap_columns(),
        )

    def render(self) -> None:
        """Lay out, wrap and write the table to the sink.

        An empty table writes nothing. A table forced wider than the maximum
        by non-wrappable cells is written at its full width.
        """
        widths = self.column_widths()
        table = self.build(widths)
        if table is None:
            logger.debug("Skipping empty table")
            return

        width = self.table_width(widths)
        if width > self.max_width:
            logger.debug("Table exceeds maximum width", width=width, max_width=self.max_width)

        logger.debug("Rendering table", columns=len(widths), rows=len(self._rows))
        self.sink.write(table, width=max(self.max_width, width))
