"""Column width planning for adaptive tables.

The planner decides how wide each column may become so that the whole table
fits a maximum width. Widths are shared out in proportion to each column's
natural (unwrapped) width, but no column is squeezed below its minimum: narrow
cells, non-wrappable cells and header cells all hold their column open.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from tablefit.layout import markup
from tablefit.layout.cells import Cell, Row, RowLike, body_rows
from tablefit.logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_MIN_COLUMN_WIDTH = 10

MeasureFunc = Callable[[str], int]


@dataclass(frozen=True, slots=True)
class BorderMetrics:
    """Widths of the characters a painter draws around cell content.

    The defaults match a Rich table with a box style and ``padding=(0, 1)``.
    """

    vertical_border_width: int = 1
    padding_width: int = 1

    def overhead(self, column_count: int) -> int:
        """Total width taken by borders and padding for ``column_count`` columns."""
        if column_count <= 0:
            return 0
        return (column_count + 1) * self.vertical_border_width + (
            column_count * 2 * self.padding_width
        )


@dataclass(slots=True)
class ColumnMeasurements:
    """Natural and minimum widths per column index."""

    count: int = 0
    natural: dict[int, int] = field(default_factory=dict)
    minimum: dict[int, int] = field(default_factory=dict)


def cell_width(cell: Cell, measure: MeasureFunc = markup.cell_width) -> int:
    """Width a cell contributes to each column it covers.

    The width of a cell is the width of its longest line. A spanning cell
    shares its width evenly between its columns, rounded up.
    """
    width = measure(cell.text)
    if cell.span > 1:
        return math.ceil(width / cell.span)
    return width


def measure_columns(
    headers: Sequence[Row],
    rows: Sequence[RowLike],
    min_column_width: int = DEFAULT_MIN_COLUMN_WIDTH,
    measure: MeasureFunc = markup.cell_width,
) -> ColumnMeasurements:
    """Find the natural and minimum width of every column.

    A spanning cell is painted in the first column it covers. When it must
    not wrap (a header or a non-wrappable cell) that column's minimum is the
    cell's full width; the other covered columns use the evenly divided width.

    Args:
        headers: Header rows. Header cells never shrink below their content.
        rows: Body rows; separators are skipped.
        min_column_width: Default minimum width for wrappable columns.
        measure: Display width function for cell text.

    Returns:
        The column count and per-column natural and minimum widths.
    """
    result = ColumnMeasurements()
    tagged = [(row, True) for row in headers] + [(row, False) for row in body_rows(rows)]

    for row, is_header in tagged:
        column = 0
        for cell in row:
            width = cell_width(cell, measure)

            # The default minimum is min_column_width, but narrow cells,
            # non-wrapping cells and header cells keep their own width.
            min_cell_width = min_column_width
            if width < min_column_width or not cell.wrappable or is_header:
                min_cell_width = width

            for index in range(column, column + cell.span):
                result.natural[index] = max(result.natural.get(index, 0), width)
                result.minimum[index] = max(result.minimum.get(index, 0), min_cell_width)
            if cell.span > 1 and (is_header or not cell.wrappable):
                full_width = measure(cell.text)
                result.minimum[column] = max(result.minimum[column], full_width)
            column += cell.span
        result.count = max(result.count, column)

    return result


def _round_half_up(value: float) -> int:
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def allocate_widths(
    natural: dict[int, int],
    minimum: dict[int, int],
    budget: int,
) -> dict[int, int]:
    """Share ``budget`` between columns in proportion to their natural widths.

    Columns are processed from narrowest to widest. Each one receives its
    proportional share of what is left, never more than its natural width and
    never less than its minimum, so wide columns absorb any shortfall. When
    many minimums are forced the total can exceed ``budget``.
    """
    widths: dict[int, int] = {}
    remaining_natural = sum(natural.values())
    remaining_budget = budget

    for column in sorted(natural, key=lambda index: (natural[index], index)):
        column_width = natural[column]
        if remaining_natural > 0:
            share = _round_half_up(remaining_budget * column_width / remaining_natural)
        else:
            share = 0
        allocated = min(share, column_width)

        # Do not shrink columns which are already narrower than the minimum.
        allocated = max(allocated, minimum.get(column, 0), 1)

        widths[column] = allocated
        remaining_natural -= column_width
        remaining_budget -= allocated

    return dict(sorted(widths.items()))


def compute_column_widths(
    headers: Sequence[Row],
    rows: Sequence[RowLike],
    max_table_width: int,
    min_column_width: int = DEFAULT_MIN_COLUMN_WIDTH,
    border: BorderMetrics | None = None,
    measure: MeasureFunc = markup.cell_width,
) -> dict[int, int]:
    """Compute the target content width of every column.

    Args:
        headers: Header rows.
        rows: Body rows and separators.
        max_table_width: Width the whole table, borders included, should fit.
        min_column_width: Width below which wrappable columns are not squeezed.
        border: Border and padding widths of the painter.
        measure: Display width function for cell text.

    Returns:
        Mapping of column index to target width. Empty for an empty table.
    """
    border = border or BorderMetrics()
    columns = measure_columns(headers, rows, min_column_width, measure)
    if columns.count == 0:
        return {}

    budget = max_table_width - border.overhead(columns.count)
    widths = allocate_widths(columns.natural, columns.minimum, budget)

    logger.debug(
        "Computed column widths",
        columns=columns.count,
        budget=budget,
        widths=widths,
    )
    return widths
