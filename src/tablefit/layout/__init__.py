"""Column layout and markup-aware wrapping for terminal tables."""

from tablefit.layout.cells import (
    SEPARATOR,
    Cell,
    PlainCell,
    Row,
    RowLike,
    Separator,
    StructuredCell,
    to_cell,
    to_header_rows,
    to_row,
)
from tablefit.layout.exceptions import InvalidCellError, InvalidRowError, TableError
from tablefit.layout.planner import (
    DEFAULT_MIN_COLUMN_WIDTH,
    BorderMetrics,
    ColumnMeasurements,
    compute_column_widths,
    measure_columns,
)
from tablefit.layout.wrapper import wrap, wrap_plain

__all__ = [
    "DEFAULT_MIN_COLUMN_WIDTH",
    "SEPARATOR",
    "BorderMetrics",
    "Cell",
    "ColumnMeasurements",
    "InvalidCellError",
    "InvalidRowError",
    "PlainCell",
    "Row",
    "RowLike",
    "Separator",
    "StructuredCell",
    "TableError",
    "compute_column_widths",
    "measure_columns",
    "to_cell",
    "to_header_rows",
    "to_row",
    "wrap",
    "wrap_plain",
]
